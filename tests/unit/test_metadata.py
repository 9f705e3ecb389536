from dsar_detect.metadata import extract_pdf_metadata

SAMPLE_PDF = (
    b"%PDF-1.4\n"
    b"1 0 obj << /Title (Quarterly Report) /Author <FEFF004A006F> /CreationDate (D:20240101120000Z) >>\n"
    b"2 0 obj << /Type /Pages /Count 2 >>\n"
    b"3 0 obj << /Type /Page >>\n"
    b"4 0 obj << /Type/Page >>\n"
    b"%%EOF"
)


def test_extracts_literal_and_hex_fields():
    metadata = extract_pdf_metadata(SAMPLE_PDF)
    assert metadata.title == "Quarterly Report"
    assert metadata.author == "Jo"
    assert metadata.creation_date == "D:20240101120000Z"
    assert metadata.subject is None
    assert metadata.page_count == 2


def test_garbage_input_yields_empty_metadata():
    metadata = extract_pdf_metadata(b"\xff\xfe\x00not a pdf")
    assert metadata.to_dict() == {
        "title": None,
        "author": None,
        "subject": None,
        "creator": None,
        "producer": None,
        "creation_date": None,
        "mod_date": None,
        "page_count": None,
    }


def test_hex_title_outside_basic_plane_is_decoded():
    metadata = extract_pdf_metadata(b"<< /Title <FEFF0048006900D83DDE00> >>")
    assert metadata.title == "Hi\U0001F600"


def test_unpaired_surrogate_is_replaced():
    metadata = extract_pdf_metadata(b"<< /Title <FEFF0041D83D> >>")
    assert metadata.title == "A\ufffd"
    metadata.title.encode("utf-8")
