from quillquest.schemas.schema import (
    CharacterRequest,
    ContinueStoryRequest,
    PromptRequest,
    SceneRequest,
    ValidationFailure,
    WorldRequest,
    validate_request,
)
