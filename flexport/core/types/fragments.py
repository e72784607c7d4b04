# flexport/core/types/fragments.py

"""Format-neutral XML fragments produced by multi-valued properties"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

FRAGMENT_MODEL_CONFIG = ConfigDict(frozen=True, extra="forbid")


class XmlValue(BaseModel):
    """One value element: tag name, text content and extra attributes"""

    model_config = FRAGMENT_MODEL_CONFIG

    tag: str = Field(min_length=1)
    text: str
    attributes: dict[str, str] = Field(default_factory=dict)


class XmlFragment(BaseModel):
    """All values of a single usergroup bucket

    When value_tag is set the bucket is rendered as a `name` element wrapping
    one element per value. Without it, each value is rendered directly as a
    `name` element carrying the usergroup itself.
    """

    model_config = FRAGMENT_MODEL_CONFIG

    name: str = Field(min_length=1)
    usergroup: str = ""
    value_tag: str | None = None
    key: str | None = Field(default=None, description="Key of keyed properties (attributes)")
    values: tuple[XmlValue, ...] = ()

    @property
    def nested(self) -> bool:
        """Whether values are wrapped in a per-usergroup element"""
        return self.value_tag is not None
