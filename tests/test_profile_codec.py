"""
Tests for the profile transport token.
"""
import base64
import json
from urllib.parse import quote

import pytest

from hopeful_futures.schemas.profile import Profile
from hopeful_futures.services.profile_codec import decode_profile, encode_profile, profile_to_form_data


def make_token(data) -> str:
    raw = json.dumps(data).encode("utf-8")
    return quote(base64.b64encode(raw).decode("ascii"), safe="")


@pytest.fixture
def sample_profile():
    return Profile(
        name="Jordan Lee",
        gender="non-binary",
        homeless="yes",
        race=["black", "hispanic"],
        interests=["Music", "Cooking", "Gardening"],
        disabilities=["Back Injury", "Low Vision"],
        medical_conditions=["Asthma"],
        location="Austin, Texas",
    )


def test_round_trip_preserves_every_field(sample_profile):
    decoded = decode_profile(encode_profile(sample_profile))

    assert decoded is not None
    assert decoded.name == sample_profile.name
    assert decoded.gender == sample_profile.gender
    assert decoded.homeless == sample_profile.homeless
    assert decoded.location == sample_profile.location
    assert set(decoded.race) == set(sample_profile.race)
    assert set(decoded.interests) == set(sample_profile.interests)
    assert set(decoded.disabilities) == set(sample_profile.disabilities)
    assert set(decoded.medical_conditions) == set(sample_profile.medical_conditions)


def test_token_is_url_safe(sample_profile):
    token = encode_profile(sample_profile)
    assert all(ch not in token for ch in "+/= &?")


def test_every_field_is_encoded_even_when_empty():
    data = profile_to_form_data(Profile(name="Sam"))
    assert data == {
        "name": "Sam",
        "gender": "",
        "homeless": "",
        "race": "[]",
        "interests": "[]",
        "disabilities": "[]",
        "medical-conditions": "[]",
        "location": "",
    }


def test_empty_interests_decode_to_empty_collection():
    decoded = decode_profile(encode_profile(Profile(interests=[])))
    assert decoded is not None
    assert decoded.interests == ()


@pytest.mark.parametrize(
    "token",
    [
        "",
        None,
        "not base64!!",
        "%%%",
        quote(base64.b64encode(b"definitely not json").decode("ascii")),
        quote(base64.b64encode(b"\xff\xfe\xfd").decode("ascii")),
        make_token([1, 2, 3]),
        make_token("just a string"),
    ],
)
def test_decode_returns_none_for_bad_tokens(token):
    assert decode_profile(token) is None


def test_decode_accepts_comma_separated_legacy_values():
    token = make_token({
        "name": "Ana",
        "race": "asian",
        "interests": "Music, Art ,Travel",
        "disabilities": '["Knee Injury"]',
    })
    decoded = decode_profile(token)

    assert decoded is not None
    assert decoded.race == ("asian",)
    assert decoded.interests == ("Music", "Art", "Travel")
    assert decoded.disabilities == ("Knee Injury",)
    assert decoded.medical_conditions == ()


def test_decode_tolerates_missing_and_unknown_fields():
    decoded = decode_profile(make_token({"gender": "robot", "homeless": "maybe", "location": "Reno, NV"}))

    assert decoded is not None
    assert decoded.gender is None
    assert decoded.homeless is None
    assert decoded.name == ""
    assert decoded.interests == ()
    assert decoded.location == "Reno, NV"


def test_decode_reads_legacy_interest_key():
    decoded = decode_profile(make_token({"interest": "Sports", "medicalConditions": ["Diabetes"]}))
    assert decoded is not None
    assert decoded.interests == ("Sports",)
    assert decoded.medical_conditions == ("Diabetes",)


def test_decode_accepts_unescaped_token(sample_profile):
    raw_b64 = base64.b64encode(json.dumps(profile_to_form_data(sample_profile)).encode()).decode()
    decoded = decode_profile(raw_b64)
    assert decoded is not None
    assert decoded.name == "Jordan Lee"


def test_duplicate_values_collapse():
    profile = Profile(interests=["Music", "Music", "Art"])
    assert profile.interests == ("Music", "Art")
