"""Fixed instruction prompts and output schema for the chat-completion calls."""

from __future__ import annotations

from typing import Any

SOLUTION_PROMPT = (
    "Please separate the solution/explanation and the code in the following "
    "message: I want to be able to later paste the code in a markdown editor. "
    "For the explanation, keep it minimal. Only adjust my explanation for "
    "readability purposes. Don't add anything additional to the explanation."
)

PROBLEM_PROMPT = (
    "The following text is a description of a problem that is slightly "
    "misformatted. All that I need you to do is clean up the formatting of the "
    "text so I can paste it in a markdown editor. Put the examples and "
    "constraints in separate markdown blocks (by separate I mean split the "
    "examples into their own markdown blocks). There will be irrelevant text "
    "that comes up because I copy pasted the entire site. You can remove that "
    "text that seems like it was copy-pasted on accident. Just bold the title "
    "of the problem (don't use any # or header markdown things). DO NOT modify "
    "anything else including the actual words themselves or anything else. "
    "JUST focus on formatting. Also if the constraint is seemingly a random "
    "number like 104 or 103 or something it could actually be 10^4 or 10^3. "
    "When I copy and paste the exponents are removed so that's why they appear "
    "like that."
)

SOLUTION_SCHEMA: dict[str, Any] = {
    "name": "code_solution_response",
    "strict": True,
    "schema": {
        "type": "object",
        "properties": {
            "solutionExplanation": {
                "type": "string",
                "description": "The solution and explanation text",
            },
            "code": {
                "type": "string",
                "description": "The code block portion only",
            },
        },
        "required": ["solutionExplanation", "code"],
        "additionalProperties": False,
    },
}


def build_user_message(instruction: str, text: str) -> dict[str, str]:
    """Return the single user message sent for ``text``."""

    return {"role": "user", "content": instruction + text}


__all__ = ["PROBLEM_PROMPT", "SOLUTION_PROMPT", "SOLUTION_SCHEMA", "build_user_message"]
