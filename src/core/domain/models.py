"""Domain models (Pydantic v2).

These describe *what* a puzzle day and a scaffold run are, not how inputs
are fetched or projects are created.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from core.domain.errors import UsageError


class PuzzleDay(BaseModel):
    """A puzzle identified by its day and year, both as given on the command line."""

    day: str = Field(
        ...,
        min_length=1,
        description="Puzzle day (1-25 on the real site, not validated for fetching).",
    )
    year: str = Field(
        ...,
        min_length=1,
        description="Puzzle year, four digits.",
    )

    @property
    def padded_day(self) -> str:
        """Two digit day, so `"3"` and `"03"` both give `"03"`.

        A day that is not a decimal number is a `UsageError`. Shell
        `printf '%02d' abc` prints `00` and lets a script carry on; here
        the run stops before any side effect.
        """

        try:
            number = int(self.day, 10)
        except ValueError:
            raise UsageError(f"day must be a number, got {self.day!r}") from None
        return f"{number:02d}"

    def project_name(self, prefix: str) -> str:
        return f"{prefix}-{self.year}-{self.padded_day}"

    def input_url(self, host: str) -> str:
        return f"https://{host}/{self.year}/day/{self.day}/input"


class StepResult(BaseModel):
    """Outcome of a single scaffold step."""

    name: str = Field(..., min_length=1, description="Step identifier (e.g. 'create-project').")
    ok: bool = Field(default=True, description="Whether the step succeeded.")
    returncode: int | None = Field(
        default=None,
        description="Exit code of the external command, when one ran to completion.",
    )
    detail: str = Field(default="", description="Human readable detail (command, path, error).")


class ScaffoldReport(BaseModel):
    """Aggregate of a scaffold run."""

    project_name: str = Field(..., min_length=1)
    project_dir: str = Field(..., min_length=1, description="Absolute path of the project directory.")
    source_file: str = Field(..., min_length=1, description="Absolute path of the copied source file.")
    steps: list[StepResult] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(step.ok for step in self.steps)

    @property
    def failed_steps(self) -> list[str]:
        return [step.name for step in self.steps if not step.ok]
