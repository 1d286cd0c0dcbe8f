from zhconvert.errors import FileNotFound, InvalidFormat, InvalidTextDictionary, OpenCCError


def test_file_not_found_message():
    path = "/opencc/no/such/file/or/directory"
    err = FileNotFound(path)
    assert str(err) == path + " not found or not accessible."
    assert err.file_name == path


def test_invalid_text_dictionary_keeps_line_and_reason():
    err = InvalidTextDictionary("No value in an item", 7)
    assert err.line_num == 7
    assert err.reason == "No value in an item"
    assert "No value in an item" in str(err)


def test_invalid_text_dictionary_is_an_invalid_format():
    err = InvalidTextDictionary("bad", 3)
    assert isinstance(err, InvalidFormat)
    assert isinstance(err, OpenCCError)
    assert err.line_num == 3
    assert err.reason == "bad"
    assert "bad" in str(err)


def test_file_not_found_is_an_opencc_error():
    err = FileNotFound("x.json")
    assert isinstance(err, OpenCCError)
    assert err.file_name == "x.json"
    assert str(err) == "x.json not found or not accessible."