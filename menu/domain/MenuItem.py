"""MenuItem domain entity: one read-only entry of the master menu."""
from dataclasses import dataclass, asdict

from menu.utilities.validators import MenuItemInput


@dataclass(frozen=True)
class MenuItem:
    item_name: str
    category: str
    calories: int
    taste_profile: str
    popularity_score: float

    def __str__(self) -> str:
        return (f"{self.item_name} ({self.category}) - {self.calories} kcal - "
                f"{self.taste_profile} - popularity {self.popularity_score}")

    @staticmethod
    def from_dict(data):
        '''Creates a MenuItem from a catalog record. Raises pydantic.ValidationError on bad input.'''
        validated = MenuItemInput.model_validate(data)
        return MenuItem(**validated.model_dump())

    def to_dict(self):
        return asdict(self)
