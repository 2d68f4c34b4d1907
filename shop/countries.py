# shop/countries.py
"""
Selectable countries for the order form.

The list is derived once from the numbering-plan metadata shipped with
``phonenumbers``: every region that has a calling code becomes an entry.
Arab countries come first in a fixed sequence, the rest follow by English
name.
"""
from dataclasses import dataclass

import phonenumbers

FLAG_URL = "https://flagcdn.com/24x18/{code}.png"

PRIORITY_COUNTRIES = (
    "SA", "AE", "EG", "KW", "QA", "BH", "OM", "JO", "LB",
    "IQ", "SY", "YE", "PS", "SD", "LY", "TN", "DZ", "MA",
)

# code -> (Arabic, English). Regions missing here display their code.
COUNTRY_NAMES = {
    "SA": ("السعودية", "Saudi Arabia"),
    "AE": ("الإمارات", "United Arab Emirates"),
    "EG": ("مصر", "Egypt"),
    "KW": ("الكويت", "Kuwait"),
    "QA": ("قطر", "Qatar"),
    "BH": ("البحرين", "Bahrain"),
    "OM": ("عُمان", "Oman"),
    "JO": ("الأردن", "Jordan"),
    "LB": ("لبنان", "Lebanon"),
    "IQ": ("العراق", "Iraq"),
    "SY": ("سوريا", "Syria"),
    "YE": ("اليمن", "Yemen"),
    "PS": ("فلسطين", "Palestine"),
    "SD": ("السودان", "Sudan"),
    "LY": ("ليبيا", "Libya"),
    "TN": ("تونس", "Tunisia"),
    "DZ": ("الجزائر", "Algeria"),
    "MA": ("المغرب", "Morocco"),
    "US": ("الولايات المتحدة", "United States"),
    "GB": ("المملكة المتحدة", "United Kingdom"),
    "DE": ("ألمانيا", "Germany"),
    "FR": ("فرنسا", "France"),
    "IT": ("إيطاليا", "Italy"),
    "ES": ("إسبانيا", "Spain"),
    "TR": ("تركيا", "Turkey"),
    "IN": ("الهند", "India"),
    "PK": ("باكستان", "Pakistan"),
    "BD": ("بنغلاديش", "Bangladesh"),
    "ID": ("إندونيسيا", "Indonesia"),
    "MY": ("ماليزيا", "Malaysia"),
    "CN": ("الصين", "China"),
    "JP": ("اليابان", "Japan"),
    "KR": ("كوريا الجنوبية", "South Korea"),
    "AU": ("أستراليا", "Australia"),
    "CA": ("كندا", "Canada"),
    "BR": ("البرازيل", "Brazil"),
    "RU": ("روسيا", "Russia"),
    "ZA": ("جنوب أفريقيا", "South Africa"),
    "NG": ("نيجيريا", "Nigeria"),
    "KE": ("كينيا", "Kenya"),
    "GH": ("غانا", "Ghana"),
    "MX": ("المكسيك", "Mexico"),
    "AR": ("الأرجنتين", "Argentina"),
    "CL": ("تشيلي", "Chile"),
    "CO": ("كولومبيا", "Colombia"),
    "NL": ("هولندا", "Netherlands"),
    "BE": ("بلجيكا", "Belgium"),
    "SE": ("السويد", "Sweden"),
    "NO": ("النرويج", "Norway"),
    "DK": ("الدنمارك", "Denmark"),
    "FI": ("فنلندا", "Finland"),
    "PL": ("بولندا", "Poland"),
    "AT": ("النمسا", "Austria"),
    "CH": ("سويسرا", "Switzerland"),
    "GR": ("اليونان", "Greece"),
    "PT": ("البرتغال", "Portugal"),
    "IE": ("أيرلندا", "Ireland"),
    "NZ": ("نيوزيلندا", "New Zealand"),
    "SG": ("سنغافورة", "Singapore"),
    "TH": ("تايلاند", "Thailand"),
    "VN": ("فيتنام", "Vietnam"),
    "PH": ("الفلبين", "Philippines"),
}


@dataclass(frozen=True)
class Country:
    code: str
    dial_code: str
    name_ar: str
    name_en: str
    flag: str

    def label(self, language):
        return self.name_en if language == "en" else self.name_ar

    def as_dict(self):
        return {
            "code": self.code,
            "dial_code": self.dial_code,
            "name_ar": self.name_ar,
            "name_en": self.name_en,
            "flag": self.flag,
        }


def dial_code_for(code):
    calling_code = phonenumbers.country_code_for_region(code)
    return f"+{calling_code}" if calling_code else ""


def _sort_key(country):
    if country.code in PRIORITY_COUNTRIES:
        return (0, PRIORITY_COUNTRIES.index(country.code), "")
    return (1, 0, country.name_en.casefold())


def build_country_list(regions=None):
    """Return the ordered list of countries that have a dialing prefix."""
    if regions is None:
        regions = phonenumbers.SUPPORTED_REGIONS
    countries = []
    for code in regions:
        dial_code = dial_code_for(code)
        if not dial_code:
            continue
        name_ar, name_en = COUNTRY_NAMES.get(code, (code, code))
        countries.append(Country(
            code=code,
            dial_code=dial_code,
            name_ar=name_ar,
            name_en=name_en,
            flag=FLAG_URL.format(code=code.lower()),
        ))
    return sorted(countries, key=_sort_key)


COUNTRIES = build_country_list()
_BY_CODE = {c.code: c for c in COUNTRIES}


def get_country(code):
    if not code:
        return None
    return _BY_CODE.get(code.strip().upper())


def search_countries(query, countries=None):
    # The picker stays empty until something is typed
    if not query:
        return []
    if countries is None:
        countries = COUNTRIES
    lowered = query.lower()
    return [
        c for c in countries
        if query in c.name_ar
        or lowered in c.name_en.lower()
        or query in c.dial_code
        or lowered in c.code.lower()
    ]
