"""Combo domain entity: an accepted (main, side, drink) triple with its metrics."""
from dataclasses import dataclass


def combo_signature(main_name: str, side_name: str, drink_name: str) -> str:
    """Identify a triple by its item names, independent of the order they were drawn in."""
    return "_".join(sorted((main_name, side_name, drink_name)))


@dataclass(frozen=True)
class Combo:
    combo_id: str
    main: str
    side: str
    drink: str
    calorie_count: int
    popularity_score: float  # average of the three items, rounded to 2 decimals
    reasoning: str

    @property
    def signature(self) -> str:
        return combo_signature(self.main, self.side, self.drink)

    @property
    def item_names(self) -> tuple[str, str, str]:
        return (self.main, self.side, self.drink)

    def to_dict(self):
        return {
            "combo_id": self.combo_id,
            "main": self.main,
            "side": self.side,
            "drink": self.drink,
            "calorie_count": self.calorie_count,
            "popularity_score": self.popularity_score,
            "reasoning": self.reasoning,
        }
