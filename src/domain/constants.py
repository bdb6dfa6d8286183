"""Domain constants for ledger classification and report catalogues."""

from src.domain.models.catalogue import (
    CatalogueEntry,
    PositionCategory,
    ReportCatalogue,
    SettlementCategory,
)

INCOME_PREFIX = "7"
EXPENSE_PREFIX = "4"
SETTLEMENT_PREFIX = "2"
FINANCIAL_POSITION_PREFIX = "1"
EXCLUDED_SETTLEMENT_PREFIX = "200"
INTENTIONS_PREFIX = "210"
SYNTHETIC_SEGMENTS = 3

DEFAULT_CATALOGUE_VERSION = "2024.1"

DEFAULT_INCOME_ACCOUNTS = (
    CatalogueEntry("701", "Intencje odprawione"),
    CatalogueEntry("702", "Duszpasterstwo OMI"),
    CatalogueEntry("703", "Duszpasterstwo parafialne"),
    CatalogueEntry("704", "Kolęda"),
    CatalogueEntry("705", "Zastępstwa zagraniczne"),
    CatalogueEntry("706", "Wypominki parafialne"),
    CatalogueEntry("710", "Odsetki i przychody finansowe"),
    CatalogueEntry("711", "Sprzedaż kalendarzy"),
    CatalogueEntry("712", "Dzierżawa"),
    CatalogueEntry("713", "Sprzedaż z działalności gospodarczej"),
    CatalogueEntry("714", "Pensje, emerytury i renty"),
    CatalogueEntry("715", "Zwroty"),
    CatalogueEntry("716", "Usługi, noclegi, rekolektanci"),
    CatalogueEntry("717", "Inne"),
    CatalogueEntry("718", "Usługi działalności gospodarczej"),
    CatalogueEntry("719", "Dzierżawa przechodnia"),
    CatalogueEntry("720", "Ofiary"),
    CatalogueEntry("724", "Msze Wieczyste"),
    CatalogueEntry("725", "Nadzwyczajne przychody"),
    CatalogueEntry("727", "Cmentarz"),
    CatalogueEntry("728", "Różnice kursowe"),
    CatalogueEntry("730", "Sprzedaż majątku trwałego"),
)

DEFAULT_EXPENSE_ACCOUNTS = (
    CatalogueEntry("401", "Biurowe"),
    CatalogueEntry("402", "Poczta"),
    CatalogueEntry("403", "Telefony, Internet TV"),
    CatalogueEntry("404", "Reprezentacyjne"),
    CatalogueEntry("405", "Prowizje i opłaty bankowe"),
    CatalogueEntry("406", "Usługi serwisowe"),
    CatalogueEntry("407", "Wywóz śmieci i nieczystości"),
    CatalogueEntry("408", "Ubezpieczenie majątku trwałego"),
    CatalogueEntry("410", "Pralnia, artykuły chemiczne i konserwacja"),
    CatalogueEntry("411", "Podróże komunikacją publiczną"),
    CatalogueEntry("412", "Utrzymanie samochodu oraz zakup nowego"),
    CatalogueEntry("413", "Noclegi"),
    CatalogueEntry("414", "Honoraria duszpasterskie"),
    CatalogueEntry("420", "Pensje osób zatrudnionych"),
    CatalogueEntry("421", "Osobiste, higiena osobista"),
    CatalogueEntry("422", "Formacja pierwsza"),
    CatalogueEntry("423", "Formacja ustawiczna"),
    CatalogueEntry("424", "Leczenie, opieka zdrowotna"),
    CatalogueEntry("430", "Kult"),
    CatalogueEntry("431", "Książki, gazety, czasopisma, prenumeraty"),
    CatalogueEntry("435", "Wakacyjne"),
    CatalogueEntry("439", "Koszty kolędy"),
    CatalogueEntry("440", "Kuchnia i koszty posiłków"),
    CatalogueEntry("441", "Funkcjonowanie salonu"),
    CatalogueEntry("442", "Odzież"),
    CatalogueEntry("443", "Pralnia, prasowalnia, zakupy, sprzęt"),
    CatalogueEntry(
        "444",
        "Media, energia elektryczna, woda, gaz, ogrzewanie, węgiel",
    ),
    CatalogueEntry("445", "Podatki i opłaty urzędowe"),
    CatalogueEntry("446", "Ogród, park i cmentarz"),
    CatalogueEntry("447", "Usługi działalności gospodarczej"),
    CatalogueEntry("448", "Towary do sprzedaży"),
    CatalogueEntry("449", "Zakup towarów działalności gospodarczej"),
    CatalogueEntry("450", "Inne"),
    CatalogueEntry("451", "Zakupy / remonty zwyczajne"),
    CatalogueEntry("452", "Zakupy / remonty nadzwyczajne"),
    CatalogueEntry("453", "Spotkania delegacje"),
    CatalogueEntry("454", "Scholastykat międzynarodowy"),
    CatalogueEntry("455", "Studia, studenci, szkolenia"),
    CatalogueEntry("456", "Powołania"),
    CatalogueEntry("457", "Apostolat i posługi"),
    CatalogueEntry("458", "Biedni"),
    CatalogueEntry("459", "Misje, pomoc misjonarzom"),
    CatalogueEntry("461", "Kuria diecezjalna"),
    CatalogueEntry("462", "Świadczenia na dom"),
    CatalogueEntry("463", "Świadczenia dla Adm. Generalnej"),
)

DEFAULT_FINANCIAL_POSITION_CATEGORIES = (
    PositionCategory(
        "kasa_domu",
        "1. Kasa domu",
        ("100", "101", "102", "103", "104", "105", "106", "107", "108", "109"),
    ),
    PositionCategory(
        "bank",
        "2. Bank",
        ("110", "111", "112", "113", "114", "115", "116"),
    ),
    PositionCategory("lokaty", "3. Lokaty bankowe", ("117",)),
)

DEFAULT_SETTLEMENT_CATEGORIES = (
    SettlementCategory("loans_given", "1. Pożyczki udzielone", ("212", "213")),
    SettlementCategory("loans_taken", "2. Pożyczki zaciągnięte", ("215",)),
    SettlementCategory("transitory", "3. Sumy przechodnie", ("149", "150")),
    SettlementCategory(
        "province",
        "4. Rozliczenia z prowincją",
        ("200", "201"),
    ),
    SettlementCategory(
        "others",
        "5. Rozliczenia z innymi",
        ("202", "208", "217"),
    ),
)

DEFAULT_CATALOGUE = ReportCatalogue(
    version=DEFAULT_CATALOGUE_VERSION,
    income=DEFAULT_INCOME_ACCOUNTS,
    expense=DEFAULT_EXPENSE_ACCOUNTS,
    financial_position=DEFAULT_FINANCIAL_POSITION_CATEGORIES,
    settlements=DEFAULT_SETTLEMENT_CATEGORIES,
    intentions_prefix=INTENTIONS_PREFIX,
    intentions_name="1. Intencje",
)

SALDO_ROW_KEY = "saldo"
SALDO_ROW_NAME = "SALDO"


__all__ = [
    "INCOME_PREFIX",
    "EXPENSE_PREFIX",
    "SETTLEMENT_PREFIX",
    "FINANCIAL_POSITION_PREFIX",
    "EXCLUDED_SETTLEMENT_PREFIX",
    "INTENTIONS_PREFIX",
    "SYNTHETIC_SEGMENTS",
    "DEFAULT_CATALOGUE_VERSION",
    "DEFAULT_INCOME_ACCOUNTS",
    "DEFAULT_EXPENSE_ACCOUNTS",
    "DEFAULT_FINANCIAL_POSITION_CATEGORIES",
    "DEFAULT_SETTLEMENT_CATEGORIES",
    "DEFAULT_CATALOGUE",
    "SALDO_ROW_KEY",
    "SALDO_ROW_NAME",
]
