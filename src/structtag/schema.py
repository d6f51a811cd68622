from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .config import GrammarConfig, get_option_separator
from .quoting import quote_value


class Tag(BaseModel):
    """A single ``key:"name,option,..."`` entry of a tag string."""

    model_config = ConfigDict(validate_assignment=True)

    key: str = Field(..., description="The tag key, e.g. json.")
    name: str = Field("", description="The first comma-separated token of the value.")
    options: List[str] = Field(
        default_factory=list,
        description="The comma-separated tokens following the name, in order.",
    )

    def value(self) -> str:
        """Return the unquoted value: the name followed by its options."""
        if self.options:
            return get_option_separator().join([self.name, *self.options])
        return self.name

    def has_option(self, option: str) -> bool:
        return option in self.options

    def __str__(self) -> str:
        return f"{self.key}{GrammarConfig.KEY_VALUE_SEPARATOR}{quote_value(self.value())}"
