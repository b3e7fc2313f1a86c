from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float]

class SelectorSpec(BaseModel):
    """Declarative form of a simple selector, one field per part kind."""
    model_config = ConfigDict(extra="forbid")

    element: Optional[str] = Field(default=None)
    id: Optional[str] = Field(default=None)
    classes: List[str] = Field(default_factory=list)
    attributes: List[str] = Field(default_factory=list)
    pseudo_classes: List[str] = Field(default_factory=list)
    pseudo_element: Optional[str] = Field(default=None)

class Rectangle(BaseModel):
    width: Number
    height: Number

    def __init__(self, width: Number, height: Number, **data):
        super().__init__(width=width, height=height, **data)

    def get_area(self) -> Number:
        return self.width * self.height
