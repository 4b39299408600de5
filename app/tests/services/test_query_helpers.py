from app.services.query import Page, Pagination


def test_missing_zero_and_negative_values_fall_back_to_defaults():
    assert Pagination.from_params(None, None) == Pagination(page=1, limit=10)
    assert Pagination.from_params(0, 0) == Pagination(page=1, limit=10)
    assert Pagination.from_params(-3, -5) == Pagination(page=1, limit=10)


def test_offset_follows_page_and_limit():
    assert Pagination.from_params(3, 20).offset == 40


def test_page_meta_flags():
    meta = Page(items=[], total=25, pagination=Pagination(page=2, limit=10)).meta()
    assert meta == {
        "currentPage": 2,
        "totalPages": 3,
        "total": 25,
        "hasNextPage": True,
        "hasPrevPage": True,
    }


def test_empty_result_has_zero_pages():
    meta = Page(items=[], total=0, pagination=Pagination(page=1, limit=10)).meta()
    assert meta["totalPages"] == 0
    assert meta["hasNextPage"] is False
    assert meta["hasPrevPage"] is False
