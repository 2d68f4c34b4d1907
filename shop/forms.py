# shop/forms.py
from django import forms
from django.core.exceptions import ValidationError

from .models import Category, OrderStatus, Product


class CategoryForm(forms.ModelForm):
    class Meta:
        model = Category
        fields = ["name_ar", "name_en", "image_url", "is_active", "order"]
        widgets = {
            "name_ar": forms.TextInput(attrs={"class": "form-control", "dir": "rtl"}),
            "name_en": forms.TextInput(attrs={"class": "form-control", "dir": "ltr"}),
            "image_url": forms.URLInput(attrs={"class": "form-control"}),
            "order": forms.NumberInput(attrs={"class": "form-control", "min": 0}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Blank order means "append after the existing categories"
        self.fields["order"].required = False


class ProductForm(forms.ModelForm):
    class Meta:
        model = Product
        fields = ["category", "image_url", "name_ar", "name_en", "price", "show_price", "is_active"]
        widgets = {
            "category": forms.Select(attrs={"class": "form-control"}),
            "image_url": forms.URLInput(attrs={"class": "form-control"}),
            "name_ar": forms.TextInput(attrs={"class": "form-control", "dir": "rtl"}),
            "name_en": forms.TextInput(attrs={"class": "form-control", "dir": "ltr"}),
            "price": forms.NumberInput(attrs={"class": "form-control", "min": 0, "step": "0.01"}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["category"].queryset = Category.objects.order_by("order")

    def clean_price(self):
        price = self.cleaned_data.get("price")
        if price is not None and price < 0:
            raise ValidationError("Price must be ≥ 0.")
        return price


class OrderStatusForm(forms.Form):
    status = forms.ChoiceField(choices=OrderStatus.choices)


class LoginForm(forms.Form):
    # Email format is checked by shop.auth.sign_in so the message can be localized
    email = forms.CharField(max_length=254, widget=forms.EmailInput(attrs={"class": "form-control", "dir": "ltr"}))
    password = forms.CharField(widget=forms.PasswordInput(attrs={"class": "form-control"}))
