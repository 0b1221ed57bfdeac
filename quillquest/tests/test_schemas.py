from quillquest.schemas import (
    CharacterRequest,
    ContinueStoryRequest,
    PromptRequest,
    ValidationFailure,
    WorldRequest,
    validate_request,
)


def test_valid_character_request():
    req = validate_request(CharacterRequest, {"description": "a weary detective", "extra": 1})
    assert isinstance(req, CharacterRequest)
    assert req.description == "a weary detective"


def test_missing_field_uses_route_message():
    failure = validate_request(WorldRequest, {})
    assert failure == ValidationFailure(field="concept", message="World concept is required")


def test_non_string_required_field_becomes_text():
    req = validate_request(CharacterRequest, {"description": 12})
    assert req.description == "12"


def test_falsy_required_field_counts_as_missing():
    failure = validate_request(CharacterRequest, {"description": 0})
    assert failure == ValidationFailure(field="description", message="Description is required")


def test_story_text_alias():
    req = validate_request(ContinueStoryRequest, {"storyText": "Once.", "direction": "north"})
    assert req.story_text == "Once."
    assert req.direction == "north"


def test_story_text_missing():
    failure = validate_request(ContinueStoryRequest, {"storyText": ""})
    assert isinstance(failure, ValidationFailure)
    assert failure.message == "Story text is required"


def test_snake_case_story_text_is_ignored():
    failure = validate_request(ContinueStoryRequest, {"story_text": "Once."})
    assert failure == ValidationFailure(field="storyText", message="Story text is required")


def test_non_string_direction_becomes_text():
    req = validate_request(ContinueStoryRequest, {"storyText": "Once.", "direction": ["north"]})
    assert req.direction == '["north"]'


def test_empty_direction_is_absent():
    req = validate_request(ContinueStoryRequest, {"storyText": "Once.", "direction": ""})
    assert req.direction is None


def test_prompt_genre_is_optional():
    req = validate_request(PromptRequest, {})
    assert req.genre is None
