# ═════════════════════════════════════════════════════════════════════════════════
# CURATED NAME VOCABULARIES
# ═════════════════════════════════════════════════════════════════════════════════
#
# Static lookup tables used by the name part classifier, the namecasing engine
# and the title detector. Everything here is built once at import time and
# exposed as frozenset / MappingProxyType, so the tables can be shared freely
# between threads.
#
# Several of these lists (Mac exceptions, two-letter given names) were tuned
# against real name corpora. Keep them as they are unless a regression test
# says otherwise.
# ═════════════════════════════════════════════════════════════════════════════════

import unicodedata
from types import MappingProxyType

# ─────────────────────────────────────────────────────────────────────────────────
# Character classes
# ─────────────────────────────────────────────────────────────────────────────────

# Hyphen variants folded to ASCII "-" during normalization
HYPHENS = frozenset("-\u2010\u2011\u2012\u2013\u2014\u2015\u2212\uff0d\ufe58\ufe63")

# ASCII whitespace other than the plain space; its presence disables the
# ASCII fast path of normalization
ASCII_UNUSUAL_WHITESPACE = frozenset("\t\r\n")

ASCII_VOWELS = frozenset("aeiouyAEIOUY")

# ─────────────────────────────────────────────────────────────────────────────────
# Namecasing
# ─────────────────────────────────────────────────────────────────────────────────

# Stored capitalized, because membership is checked after the naive
# capitalization pass
UNCAPITALIZED_PARTICLES = frozenset(
    {
        "Da",
        "Das",
        "Dal",
        "De",
        "Del",
        "Dela",
        "Der",
        "Di",
        "D\u00ed",
        "Di\u0301",
        "Do",
        "Dos",
        "La",
        "Le",
        "Ter",
        "Van",
        "Vel",
        "Von",
        "E",
        "Y",
    }
)

# Surnames starting with "Mac" where the following letter stays lowercase
MAC_EXCEPTIONS = frozenset(
    {
        "Machin",
        "Machlin",
        "Machar",
        "Mackle",
        "Macklin",
        "Mackie",
        "Macevicius",
        "Maciulis",
        "Macias",
    }
)

# Final letters that mark a "Mac" word as an ordinary word (Macias, Macaroni...)
MAC_EXCEPTION_ENDINGS = ("a", "c", "i", "z", "j")

# ─────────────────────────────────────────────────────────────────────────────────
# Two-letter given names
# ─────────────────────────────────────────────────────────────────────────────────

# Everything with a vowel reasonably popular in the Social Security baby names
# data. Without them, an uncased two-letter word is read as a pair of initials.
_TWO_LETTER_GIVEN_NAMES_BASE = (
    "jo",
    "ty",
    "ed",
    "al",
    "bo",
    "lu",
    "cy",
    "an",
    "la",
    "aj",
    "le",
    "om",
    "pa",
    "de",
    "ky",
    "my",
    "vy",
    "vi",
    "ka",
    "sy",
    "vu",
    "yu",
    "mi",
    "su",
    "ma",
    "ha",
    "ki",
    "tu",
    "ji",
    "ja",
    "ly",
    "li",
    "ai",
    "ry",
    "ab",
    "ho",
    "da",
    "oz",
    "el",
    "na",
    "yi",
    "em",
    "di",
    "go",
    "ev",
    "mo",
    "lo",
    "ra",
    "do",
    "gi",
)

# Only the three conventional spellings are accepted ("Al", "AL", "al"), not "aL"
TWO_LETTER_GIVEN_NAMES = frozenset(
    variant
    for name in _TWO_LETTER_GIVEN_NAMES_BASE
    for variant in (name.capitalize(), name.upper(), name.lower())
)

# ─────────────────────────────────────────────────────────────────────────────────
# Titles
# ─────────────────────────────────────────────────────────────────────────────────

# The only one or two letter words allowed to end a title, compared
# case-insensitively
TWO_CHAR_TITLES = ("mr", "ms", "sr", "dr")

# Stored namecased, as produced by namecase(word, might_be_particle=False)
_TITLE_WORDS = frozenset(
    {
        # Family and courtesy
        "Aunt",
        "Auntie",
        "Dame",
        "Frau",
        "Goodman",
        "Goodwife",
        "Herr",
        "Lady",
        "Lord",
        "Madam",
        "Madame",
        "Maid",
        "Master",
        "Miss",
        "Misses",
        "Mister",
        "Mme",
        "Mrs",
        "Nanny",
        "Sir",
        "Uncle",
        # Nobility and royalty
        "Archduchess",
        "Archduke",
        "Baron",
        "Count",
        "Countess",
        "Courtier",
        "Duke",
        "Dutchess",
        "Emperor",
        "Empress",
        "Gentiluomo",
        "Hereditary",
        "King",
        "King'S",
        "Kingdom",
        "Maharajah",
        "Maharani",
        "Majesty",
        "Marchioness",
        "Marcher",
        "Marquess",
        "Marquis",
        "Marquise",
        "Pharaoh",
        "Prince",
        "Princess",
        "Queen",
        "Queen'S",
        "Royal",
        "Seigneur",
        "Sultan",
        "Sultana",
        "Tsar",
        "Tsarina",
        "Viscount",
        # Military ranks and abbreviations
        "1lt",
        "1st",
        "1sgt",
        "1stlt",
        "1stsgt",
        "2lt",
        "2nd",
        "2ndlt",
        "A1c",
        "Adjutant",
        "Adm",
        "Admiral",
        "Air",
        "Amn",
        "Bgen",
        "Brig",
        "Brigadier",
        "Briggen",
        "Capt",
        "Captain",
        "Ccmsgt",
        "Cdr",
        "Cmd",
        "Cmdr",
        "Cmsaf",
        "Cmsgt",
        "Col",
        "Colonel",
        "Commander",
        "Commander-In-Chief",
        "Commodore",
        "Corporal",
        "Cpl",
        "Cpo",
        "Cpt",
        "Csm",
        "Cwo",
        "Cwo-2",
        "Cwo-3",
        "Cwo-4",
        "Cwo-5",
        "Cwo2",
        "Cwo3",
        "Cwo4",
        "Cwo5",
        "Ens",
        "Fadm",
        "Field",
        "Flag",
        "Flight",
        "Flt",
        "Flying",
        "Gen",
        "General",
        "Generalissimo",
        "Group",
        "Gysgt",
        "Lcdr",
        "Lcpl",
        "Leut",
        "Lieut",
        "Lieutenant",
        "Ltc",
        "Ltcol",
        "Ltg",
        "Ltgen",
        "Ltjg",
        "Maj",
        "Majgen",
        "Major",
        "Marshal",
        "Mcpo",
        "Mcpoc",
        "Mcpon",
        "Mgysgt",
        "Mpco-Cg",
        "Msg",
        "Msgt",
        "Petty",
        "Pfc",
        "Pilot",
        "Po1",
        "Po2",
        "Po3",
        "Private",
        "Pslc",
        "Pte",
        "Pv2",
        "Pvt",
        "Radm",
        "Rdml",
        "Rear",
        "Sargeant",
        "Sargent",
        "Scpo",
        "Sergeant",
        "Sfc",
        "Sgm",
        "Sgt",
        "Sgtmaj",
        "Sgtmajmc",
        "Sma",
        "Smsgt",
        "Spc",
        "Sra",
        "Ssg",
        "Ssgt",
        "Staff",
        "Subaltern",
        "Subedar",
        "Tsgt",
        "Vadm",
        "Warrant",
        "Wing",
        "Wo-1",
        "Wo-2",
        "Wo-3",
        "Wo-4",
        "Wo-5",
        "Wo1",
        "Wo2",
        "Wo3",
        "Wo4",
        "Wo5",
        # Clergy and religion
        "Abbess",
        "Abbot",
        "Acolyte",
        "Adept",
        "Akhoond",
        "Almoner",
        "Archbishop",
        "Archdeacon",
        "Archdruid",
        "Arhat",
        "Ayatollah",
        "Baba",
        "Bishop",
        "Blessed",
        "Bodhisattva",
        "Brother",
        "Buddha",
        "Canon",
        "Cardinal",
        "Catholicos",
        "Chaplain",
        "Deacon",
        "Druid",
        "Elder",
        "Father",
        "Friar",
        "Giani",
        "Guru",
        "Gyani",
        "Hajji",
        "Imam",
        "Lama",
        "Mahdi",
        "Metropolitan",
        "Monsignor",
        "Mother",
        "Msgr",
        "Mufti",
        "Mullah",
        "Murshid",
        "Pastor",
        "Patriarch",
        "Pir",
        "Pope",
        "Prelate",
        "Presbyter",
        "Priest",
        "Priestess",
        "Primate",
        "Prior",
        "Rabbi",
        "Rebbe",
        "Rev",
        "Revd",
        "Reverand",
        "Reverend",
        "Saint",
        "Saoshyant",
        "Servant",
        "Siddha",
        "Sister",
        "Superior",
        "Tirthankar",
        "Vardapet",
        "Venerable",
        "Vicar",
        # Civic, legal and academic
        "Academic",
        "Advocate",
        "Ald",
        "Alderman",
        "Ambassador",
        "Appellate",
        "Apprentice",
        "Arbitrator",
        "Assistant",
        "Assoc",
        "Associate",
        "Asst",
        "Attache",
        "Attaché",
        "Attorney",
        "Bailiff",
        "Banner",
        "Bard",
        "Barrister",
        "Bearer",
        "Bench",
        "Burgess",
        "Bwana",
        "Chair",
        "Chairs",
        "Chancellor",
        "Chargé",
        "Chief",
        "Chieftain",
        "Civil",
        "Clerk",
        "Co-Chair",
        "Co-Chairs",
        "Coach",
        "Comptroller",
        "Controller",
        "Councillor",
        "Criminal",
        "Curator",
        "Customs",
        "D'Affaires",
        "Delegate",
        "Deputy",
        "Designated",
        "Det",
        "Dir",
        "Director",
        "Discovery",
        "District",
        "Division",
        "Docent",
        "Docket",
        "Doctor",
        "Doyen",
        "Dpty",
        "Edmi",
        "Edohen",
        "Effendi",
        "Ekegbian",
        "Elerunwon",
        "Envoy",
        "Federal",
        "First",
        "Foreign",
        "Forester",
        "Governor",
        "Grand",
        "Headman",
        "Her",
        "High",
        "His",
        "Hon",
        "Honorable",
        "Honourable",
        "Insp",
        "Intendant",
        "Journeyman",
        "Judge",
        "Judicial",
        "Junior",
        "Justice",
        "Lamido",
        "Law",
        "Leader",
        "Mag",
        "Mag-Judge",
        "Mag/Judge",
        "Magistrate",
        "Magistrate-Judge",
        "Matriarch",
        "Matron",
        "Mayor",
        "Member",
        "Minister",
        "Most",
        "Municipal",
        "National",
        "Nurse",
        "Officer",
        "Police",
        "Political",
        "Prefect",
        "Premier",
        "Pres",
        "President",
        "Presiding",
        "Prime",
        "Prin",
        "Principal",
        "Pro",
        "Prof",
        "Professor",
        "Provost",
        "Pursuivant",
        "Rangatira",
        "Ranger",
        "Registrar",
        "Rep",
        "Representative",
        "Resident",
        "Revenue",
        "Right",
        "Secretary",
        "Senator",
        "Senior",
        "Senior-Judge",
        "Sheikh",
        "Shehu",
        "Sheriff",
        "Solicitor",
        "Speaker",
        "Special",
        "State",
        "States",
        "Supreme",
        "Surgeon",
        "Swordbearer",
        "Sysselmann",
        "Tax",
        "Timi",
        "Treasurer",
        "United",
        "Verderer",
        "Very",
        "Vice",
        "Vizier",
        "Warden",
        "Woodman",
        # Corporate
        "Analytics",
        "Business",
        "Ceo",
        "Cfo",
        "Corporate",
        "Credit",
        "Exec",
        "Executive",
        "Family",
        "Financial",
        "Information",
        "Intelligence",
        "Knowledge",
        "Manager",
        "Marketing",
        "Mgr",
        "Operating",
        "Risk",
        "Security",
        "Strategy",
        "Technical",
        # Connectives ("Secretary of State and Treasurer", "Herr und Frau")
        "And",
        "The",
        "Und",
    }
)

# Tokenized text is NFKD-decomposed, so accented titles ("Attaché") are kept
# in both forms
TITLE_PARTS = _TITLE_WORDS | frozenset(unicodedata.normalize("NFKD", word) for word in _TITLE_WORDS)

# ─────────────────────────────────────────────────────────────────────────────────
# Default vowelless surnames
# ─────────────────────────────────────────────────────────────────────────────────

# Transliterated lowercase form -> conventional spelling. Only consulted for
# consonant-cluster words in the last position of a name.
VOWELLESS_SURNAMES = MappingProxyType(
    {
        "ng": "Ng",
        "hng": "Hng",
        "vlk": "Vlk",
        "krk": "Krk",
        "srb": "Srb",
        "chrt": "Chrt",
        "smrk": "Smrk",
    }
)
