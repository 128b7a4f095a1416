from pydantic import BaseModel, ConfigDict, Field


class PlayerProfile(BaseModel):
    """
    Persistent progress of a player, keyed by the player's name.

    Assignments are validated as well, so a negative score is rejected
    before it can reach a repository.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(
        min_length=1,
        description="The unique name of the player.",
    )
    score: int = Field(
        default=0,
        ge=0,
        description="The high score of the player.",
    )
