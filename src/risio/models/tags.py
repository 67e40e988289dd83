"""Lookup tables for well-known RIS tags and reference types.

The parser never consults these tables; any two-character tag is accepted
and stored verbatim. They exist for callers that want to interpret fields.
Adding a synonym requires only adding it to ``FIELD_TAGS``.
"""

TYPE_TAG = "TY"
END_TAG = "ER"

# Field name -> tags carrying it (priority order)
FIELD_TAGS: dict[str, list[str]] = {
    "type": ["TY"],
    "id": ["ID"],
    "title": ["TI", "T1"],
    "secondary_title": ["T2", "BT"],
    "tertiary_title": ["T3"],
    "authors": ["AU", "A1"],
    "secondary_authors": ["A2", "ED"],
    "tertiary_authors": ["A3"],
    "date": ["PY", "Y1", "DA"],
    "secondary_date": ["Y2"],
    "notes": ["N1"],
    "abstract": ["AB", "N2"],
    "keywords": ["KW"],
    "reprint": ["RP"],
    "availability": ["AV"],
    "caption": ["CA"],
    "call_number": ["CN"],
    "doi": ["DO"],
    "url": ["UR", "L1", "L2", "L3", "L4"],
    "start_page": ["SP"],
    "end_page": ["EP"],
    "journal": ["JF", "JO"],
    "journal_abbrev": ["JA", "J1", "J2"],
    "volume": ["VL"],
    "issue": ["IS"],
    "city": ["CY"],
    "publisher": ["PB"],
    "serial_number": ["SN"],
    "address": ["AD"],
    "language": ["LA"],
}

DATE_TAGS: frozenset[str] = frozenset(FIELD_TAGS["date"])

KNOWN_TAGS: dict[str, str] = {
    "TY": "Type of reference",
    "ER": "End of reference",
    "ID": "Reference ID",
    "TI": "Title",
    "T1": "Primary title",
    "T2": "Secondary title",
    "T3": "Tertiary title",
    "BT": "Book title",
    "AU": "Author",
    "A1": "Primary author",
    "A2": "Secondary author",
    "A3": "Tertiary author",
    "ED": "Editor",
    "PY": "Publication year",
    "Y1": "Primary date",
    "Y2": "Secondary date",
    "DA": "Date",
    "N1": "Notes",
    "N2": "Abstract",
    "AB": "Abstract",
    "KW": "Keyword",
    "RP": "Reprint status",
    "AV": "Availability",
    "CA": "Caption",
    "CN": "Call number",
    "DO": "DOI",
    "UR": "URL",
    "L1": "File attachment",
    "L2": "Full-text link",
    "L3": "Related record",
    "L4": "Figure",
    "SP": "Start page",
    "EP": "End page",
    "JF": "Journal full name",
    "JO": "Journal name",
    "JA": "Journal abbreviation",
    "J1": "Journal abbreviation 1",
    "J2": "Alternate title",
    "VL": "Volume",
    "IS": "Issue",
    "CY": "Place published",
    "PB": "Publisher",
    "SN": "ISSN/ISBN",
    "AD": "Author address",
    "LA": "Language",
    "U1": "User definable 1",
    "U2": "User definable 2",
    "U3": "User definable 3",
    "U4": "User definable 4",
    "U5": "User definable 5",
    "C1": "Custom 1",
    "C2": "Custom 2",
    "C3": "Custom 3",
    "C4": "Custom 4",
    "C5": "Custom 5",
    "C6": "Custom 6",
    "C7": "Custom 7",
    "C8": "Custom 8",
    "M1": "Miscellaneous 1",
    "M2": "Miscellaneous 2",
    "M3": "Miscellaneous 3",
}

REFERENCE_TYPES: dict[str, str] = {
    "ABST": "Abstract",
    "ADVS": "Audiovisual material",
    "AGGR": "Aggregated database",
    "ANCIENT": "Ancient text",
    "ART": "Art work",
    "BILL": "Bill",
    "BLOG": "Blog",
    "BOOK": "Whole book",
    "CASE": "Case",
    "CHAP": "Book chapter",
    "CHART": "Chart",
    "CLSWK": "Classical work",
    "COMP": "Computer program",
    "CONF": "Conference proceeding",
    "CPAPER": "Conference paper",
    "CTLG": "Catalog",
    "DATA": "Data file",
    "DBASE": "Online database",
    "DICT": "Dictionary",
    "EBOOK": "Electronic book",
    "ECHAP": "Electronic book section",
    "EDBOOK": "Edited book",
    "EJOUR": "Electronic article",
    "ELEC": "Web page",
    "ENCYC": "Encyclopedia",
    "EQUA": "Equation",
    "FIGURE": "Figure",
    "GEN": "Generic",
    "GOVDOC": "Government document",
    "GRANT": "Grant",
    "HEAR": "Hearing",
    "ICOMM": "Internet communication",
    "INPR": "In press",
    "JFULL": "Journal (full)",
    "JOUR": "Journal",
    "LEGAL": "Legal rule or regulation",
    "MANSCPT": "Manuscript",
    "MAP": "Map",
    "MGZN": "Magazine article",
    "MPCT": "Motion picture",
    "MULTI": "Online multimedia",
    "MUSIC": "Music score",
    "NEWS": "Newspaper",
    "PAMP": "Pamphlet",
    "PAT": "Patent",
    "PCOMM": "Personal communication",
    "RPRT": "Report",
    "SER": "Serial publication",
    "SLIDE": "Slide",
    "SOUND": "Sound recording",
    "STAND": "Standard",
    "STAT": "Statute",
    "THES": "Thesis/dissertation",
    "UNPB": "Unpublished work",
    "VIDEO": "Video recording",
}


def get_tags(name: str) -> list[str]:
    """Get the tags carrying a well-known field.

    Parameters
    ----------
    name : str
        Field name (e.g., 'title', 'authors').

    Returns
    -------
    list[str]
        Tags in priority order, or empty list if the name is unknown.
    """
    return list(FIELD_TAGS.get(name, []))


def describe_tag(tag: str) -> str | None:
    """Human-readable description of a tag, or None for vendor tags."""
    return KNOWN_TAGS.get(tag)


def reference_type_name(abbrev: str) -> str | None:
    """Readable name for a ``TY`` abbreviation, or None if non-standard."""
    return REFERENCE_TYPES.get(abbrev.strip())
