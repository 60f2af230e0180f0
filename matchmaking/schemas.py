#!/usr/bin/env python3
"""
Wire records for fruits and matches.

Inbound fruit JSON (camelCase, as stored by the data layer and found in the
seed file) is validated here before it reaches the scoring engine. Missing
keys and null values both mean unknown / no preference.
"""

import json
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator

from matchmaking.scorer.models import (
    Fruit, FruitType, FruitAttributes, FruitPreferences,
    NumericPreference, ShineFactor, Match
)


class RangeRecord(BaseModel):
    """Numeric range preference."""
    min: Optional[float] = None
    max: Optional[float] = None

    @model_validator(mode="after")
    def _check_bounds(self) -> "RangeRecord":
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self

    def to_preference(self) -> NumericPreference:
        return NumericPreference(min=self.min, max=self.max)


class AttributesRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    size: Optional[float] = None
    weight: Optional[float] = None
    has_stem: Optional[bool] = Field(None, alias="hasStem")
    has_leaf: Optional[bool] = Field(None, alias="hasLeaf")
    has_worm: Optional[bool] = Field(None, alias="hasWorm")
    shine_factor: Optional[ShineFactor] = Field(None, alias="shineFactor")
    has_chemicals: Optional[bool] = Field(None, alias="hasChemicals")

    def to_attributes(self) -> FruitAttributes:
        return FruitAttributes(
            size=self.size,
            weight=self.weight,
            has_stem=self.has_stem,
            has_leaf=self.has_leaf,
            has_worm=self.has_worm,
            shine_factor=self.shine_factor,
            has_chemicals=self.has_chemicals,
        )


class PreferencesRecord(BaseModel):
    """Preferences; shineFactor may be a single value or a list of values."""
    model_config = ConfigDict(populate_by_name=True)

    size: Optional[RangeRecord] = None
    weight: Optional[RangeRecord] = None
    has_stem: Optional[bool] = Field(None, alias="hasStem")
    has_leaf: Optional[bool] = Field(None, alias="hasLeaf")
    has_worm: Optional[bool] = Field(None, alias="hasWorm")
    shine_factor: Optional[Union[ShineFactor, List[ShineFactor]]] = Field(None, alias="shineFactor")
    has_chemicals: Optional[bool] = Field(None, alias="hasChemicals")

    def to_preferences(self) -> FruitPreferences:
        shine = self.shine_factor
        if isinstance(shine, ShineFactor):
            shine = frozenset([shine])
        elif shine is not None:
            shine = frozenset(shine)

        return FruitPreferences(
            size=self.size.to_preference() if self.size else None,
            weight=self.weight.to_preference() if self.weight else None,
            has_stem=self.has_stem,
            has_leaf=self.has_leaf,
            has_worm=self.has_worm,
            shine_factor=shine,
            has_chemicals=self.has_chemicals,
        )


class FruitRecord(BaseModel):
    """One fruit as stored by the data layer."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "fruits:orange2",
                "type": "orange",
                "attributes": {
                    "size": 8.0, "weight": 195, "hasStem": False, "hasLeaf": False,
                    "hasWorm": False, "shineFactor": "shiny", "hasChemicals": False
                },
                "preferences": {"hasWorm": False, "hasChemicals": False}
            }
        }
    )

    id: Optional[str] = None
    type: FruitType
    attributes: AttributesRecord = Field(default_factory=AttributesRecord)
    preferences: PreferencesRecord = Field(default_factory=PreferencesRecord)

    def to_fruit(self) -> Fruit:
        return Fruit(
            type=self.type,
            attributes=self.attributes.to_attributes(),
            preferences=self.preferences.to_preferences(),
            id=self.id,
        )


class MatchSummary(BaseModel):
    """Outbound summary of a ranked match."""
    model_config = ConfigDict(populate_by_name=True)

    fruit_id: str = Field(alias="fruitId")
    type: FruitType
    mutual_score: float = Field(alias="mutualScore", ge=0, le=100)
    seeker_to_fruit_score: float = Field(alias="seekerToFruitScore", ge=0, le=100)
    fruit_to_seeker_score: float = Field(alias="fruitToSeekerScore", ge=0, le=100)

    @classmethod
    def from_match(cls, match: Match) -> "MatchSummary":
        return cls(
            fruit_id=match.fruit_id,
            type=match.fruit.type,
            mutual_score=match.mutual_score,
            seeker_to_fruit_score=match.seeker_to_fruit_score,
            fruit_to_seeker_score=match.fruit_to_seeker_score,
        )


_fruit_list_adapter = TypeAdapter(List[FruitRecord])


def parse_fruits(data: list) -> List[Fruit]:
    """Validate a list of fruit dicts and convert them to engine fruits."""
    return [record.to_fruit() for record in _fruit_list_adapter.validate_python(data)]


def load_fruits(path: Union[str, Path]) -> List[Fruit]:
    """
    Load fruits from a JSON file holding an array of fruit records.

    Raises:
        FileNotFoundError: If the file doesn't exist
        pydantic.ValidationError: If any record is malformed
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return parse_fruits(data)
