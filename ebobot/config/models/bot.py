"""Reply content configuration."""

from pydantic import BaseModel, Field

DEFAULT_IMAGE_URL = (
    "https://docs.microsoft.com/en-us/dotnet/standard/microservices-architecture/"
    "media/cover-small.png"
)


class BotConfig(BaseModel):
    """Content used by the image and card replies."""

    image_url: str = Field(default=DEFAULT_IMAGE_URL, description="Image attachment URL")
    image_name: str = Field(default="imageName", description="Attachment display name")
    image_content_type: str = Field(default="image/png", description="Attachment MIME type")
    card_prompt: str = Field(
        default="What is your favorite color?",
        description="Text shown above the quick replies",
    )
    card_choices: list[str] = Field(
        default=["Red", "Yellow", "Blue"],
        min_length=1,
        description="Quick reply labels, each sent back as its own value",
    )
