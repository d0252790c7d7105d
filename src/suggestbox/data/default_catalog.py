"""
Built-in catalog used when no catalog file is configured.

Topics and countries are neither exhaustive nor accurate.
"""

TOPICS = [
    "Agriculture",
    "Climate Change",
    "Debt",
    "Digital Development",
    "Education",
    "Energy",
    "Financial Inclusion",
    "Food Security",
    "Gender",
    "Health",
    "Infrastructure",
    "Jobs",
    "Migration",
    "Poverty",
    "Private Sector",
    "Social Protection",
    "Trade",
    "Transport",
    "Urban Development",
    "Water",
]

COUNTRIES = [
    ("Argentina", "🇦🇷"),
    ("Australia", "🇦🇺"),
    ("Bangladesh", "🇧🇩"),
    ("Brazil", "🇧🇷"),
    ("Canada", "🇨🇦"),
    ("Chile", "🇨🇱"),
    ("China", "🇨🇳"),
    ("Colombia", "🇨🇴"),
    ("Egypt", "🇪🇬"),
    ("Ethiopia", "🇪🇹"),
    ("France", "🇫🇷"),
    ("Germany", "🇩🇪"),
    ("Ghana", "🇬🇭"),
    ("India", "🇮🇳"),
    ("Indonesia", "🇮🇩"),
    ("Italy", "🇮🇹"),
    ("Japan", "🇯🇵"),
    ("Kenya", "🇰🇪"),
    ("Mexico", "🇲🇽"),
    ("Morocco", "🇲🇦"),
    ("Nigeria", "🇳🇬"),
    ("Pakistan", "🇵🇰"),
    ("Peru", "🇵🇪"),
    ("Philippines", "🇵🇭"),
    ("South Africa", "🇿🇦"),
    ("Spain", "🇪🇸"),
    ("Tanzania", "🇹🇿"),
    ("Turkey", "🇹🇷"),
    ("United Kingdom", "🇬🇧"),
    ("United States", "🇺🇸"),
    ("Vietnam", "🇻🇳"),
]

POPULAR_SEARCHES = [
    "Climate finance in Africa",
    "Youth unemployment",
    "Digital payments adoption",
    "Food prices and inflation",
    "Renewable energy investment",
]
