import pytest
from pydantic import ValidationError

from earshop.api.v1.schemas.earphone import EarphoneIn
from earshop.api.v1.schemas.query import SearchQuery
from earshop.api.v1.schemas.review import ReviewEdit, ReviewIn
from earshop.api.v1.schemas.user import LoginIn, SignupIn, UserUpdateIn


def _error_fields(exc: ValidationError):
    return [".".join(str(p) for p in err["loc"]) for err in exc.errors()]


def test_product_accepts_valid_payload(earphone_payload):
    product = EarphoneIn.model_validate(earphone_payload)
    assert product.stock[0].store == "orchard"
    assert product.hours.boxCharging == 24


def test_product_collects_every_violation():
    with pytest.raises(ValidationError) as exc:
        EarphoneIn.model_validate({
            "brandModel": "Sony_WF!",
            "type": "In Ear",
            "price": -5,
            "color": [],
            "connectors": "USB",
            "image": "HTTP://X",
        })
    assert set(_error_fields(exc.value)) == {"brandModel", "type", "price", "color", "connectors", "image"}


def test_product_requires_core_fields():
    with pytest.raises(ValidationError) as exc:
        EarphoneIn.model_validate({})
    assert set(_error_fields(exc.value)) == {"brandModel", "type", "price", "color", "connectors"}


def test_product_optional_text_fields_allow_empty_and_null(earphone_payload):
    product = EarphoneIn.model_validate({**earphone_payload, "earbuds": "", "bluetooth": None})
    assert product.earbuds == ""
    assert product.bluetooth is None


def test_product_rejects_unknown_fields(earphone_payload):
    with pytest.raises(ValidationError) as exc:
        EarphoneIn.model_validate({**earphone_payload, "discount": 10})
    assert _error_fields(exc.value) == ["discount"]


def test_product_structured_stock_and_hours(earphone_payload):
    with pytest.raises(ValidationError) as exc:
        EarphoneIn.model_validate({
            **earphone_payload,
            "stock": [{"store": "Orchard", "qty": -1}],
            "hours": {"music": 0, "cableCharging": 1},
        })
    assert set(_error_fields(exc.value)) == {"stock.0.store", "stock.0.qty", "hours.music"}


@pytest.mark.parametrize("rating", [0, 6, -1, 2.5])
def test_review_rating_outside_one_to_five_is_rejected(rating):
    with pytest.raises(ValidationError) as exc:
        ReviewIn.model_validate({"email": "amy@mail.com", "comments": "ok", "rating": rating})
    assert _error_fields(exc.value) == ["rating"]


@pytest.mark.parametrize("rating", [1, 5])
def test_review_rating_bounds_are_inclusive(rating):
    assert ReviewIn.model_validate({"email": "amy@mail.com", "comments": "ok", "rating": rating}).rating == rating


def test_review_requires_email_and_comments():
    with pytest.raises(ValidationError) as exc:
        ReviewIn.model_validate({"rating": 3})
    assert set(_error_fields(exc.value)) == {"email", "comments"}


def test_review_edit_accepts_date():
    edit = ReviewEdit.model_validate({"email": "amy@mail.com", "comments": "ok", "date": "2024-01-02T03:04:05Z"})
    assert edit.date.year == 2024


@pytest.mark.parametrize("email", ["Amy@mail.com", "amy+1@mail.com", "amy@", "not-an-email"])
def test_email_rule_rejects(email):
    with pytest.raises(ValidationError):
        LoginIn.model_validate({"email": email, "password": "x"})


def test_email_is_trimmed():
    assert LoginIn.model_validate({"email": "  amy@mail.com "}).email == "amy@mail.com"


def test_login_password_is_unconstrained():
    assert LoginIn.model_validate({"email": "amy@mail.com", "password": 12}).password == 12


def test_signup_rules():
    with pytest.raises(ValidationError) as exc:
        SignupIn.model_validate({
            "username": "amy lee",
            "firstname": "Amy!",
            "email": "amy@mail.com",
            "password": "  abc  ",
        })
    assert set(_error_fields(exc.value)) == {"username", "firstname", "password"}


def test_signup_names_are_optional():
    signup = SignupIn.model_validate({"username": "amy", "email": "amy@mail.com", "password": "secret1"})
    assert signup.firstname is None


def test_user_update_cannot_touch_email_or_password():
    with pytest.raises(ValidationError) as exc:
        UserUpdateIn.model_validate({"username": "amy", "email": "x@mail.com", "password": "secret1"})
    assert set(_error_fields(exc.value)) == {"email", "password"}


def test_user_update_requires_username():
    with pytest.raises(ValidationError) as exc:
        UserUpdateIn.model_validate({"firstname": "Amy"})
    assert _error_fields(exc.value) == ["username"]


def test_query_defaults():
    query = SearchQuery.model_validate({})
    assert (query.page, query.limit) == (1, 20)


def test_query_rules():
    with pytest.raises(ValidationError) as exc:
        SearchQuery.model_validate({
            "type": "IN",
            "store": "orchard-1",
            "color": "red,blue",
            "otherColor": "red blue",
            "min_price": "cheap",
            "limit": "0",
            "page": "-2",
            "id": "a-b",
        })
    assert set(_error_fields(exc.value)) == {
        "type", "store", "color", "otherColor", "min_price", "limit", "page", "id",
    }


def test_query_accepts_color_lists():
    assert SearchQuery.model_validate({"otherColor": "red&blue,green"}).otherColor == "red&blue,green"


def test_product_price_must_be_a_number_not_a_boolean(earphone_payload):
    with pytest.raises(ValidationError) as exc:
        EarphoneIn.model_validate({**earphone_payload, "price": True})
    assert _error_fields(exc.value) == ["price"]


def test_product_dust_waterproof_cannot_be_null(earphone_payload):
    with pytest.raises(ValidationError) as exc:
        EarphoneIn.model_validate({**earphone_payload, "dustWaterproof": None})
    assert _error_fields(exc.value) == ["dustWaterproof"]


def test_review_rating_must_be_an_integer_not_a_boolean():
    with pytest.raises(ValidationError) as exc:
        ReviewIn.model_validate({"email": "amy@mail.com", "comments": "ok", "rating": True})
    assert _error_fields(exc.value) == ["rating"]


def test_echoed_id_is_accepted_and_dropped(earphone_payload):
    product = EarphoneIn.model_validate({**earphone_payload, "_id": "abc123"})
    assert "id" not in product.model_dump(exclude_unset=True)
    assert "_id" not in product.model_dump(exclude_unset=True)
    review = ReviewEdit.model_validate({"_id": "abc123", "email": "amy@mail.com", "comments": "ok"})
    assert review.model_dump(exclude_unset=True) == {"email": "amy@mail.com", "comments": "ok"}
    assert UserUpdateIn.model_validate({"_id": "abc123", "username": "amy"}).model_dump(exclude_unset=True) == {"username": "amy"}


def test_echoed_id_must_be_alphanumeric(earphone_payload):
    with pytest.raises(ValidationError) as exc:
        EarphoneIn.model_validate({**earphone_payload, "_id": "a-b"})
    assert _error_fields(exc.value) == ["_id"]
