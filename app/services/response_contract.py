"""Pydantic models for validating LLM JSON responses.

The structured-extraction call is constrained by a strict JSON schema, but the
content still arrives as text and is validated here before the pipeline uses
it.
"""

from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class SolutionContractError(RuntimeError):
    """Raised when the LLM response does not match the solution contract."""


class StructuredSolution(BaseModel):
    explanation: str = Field(alias="solutionExplanation")
    code: str

    model_config = ConfigDict(extra="forbid")

    @classmethod
    def from_json(cls, payload: str) -> "StructuredSolution":
        cleaned = _clean_json_payload(payload)
        try:
            data = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise SolutionContractError(
                f"LLM returned invalid JSON: {exc}"
            ) from exc

        if not isinstance(data, dict):
            raise SolutionContractError("LLM returned JSON that is not an object.")

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise SolutionContractError(
                f"LLM response does not match the solution schema: {exc}"
            ) from exc


def _clean_json_payload(payload: str) -> str:
    """Strip Markdown code fences that some models wrap around JSON."""
    if not payload:
        return ""

    cleaned = payload.strip()
    if cleaned.startswith("```"):
        first_newline = cleaned.find("\n")
        cleaned = cleaned[first_newline + 1 :] if first_newline != -1 else ""
        if cleaned.rstrip().endswith("```"):
            cleaned = cleaned.rstrip()[:-3]
    return cleaned.strip()


__all__ = ["SolutionContractError", "StructuredSolution"]
