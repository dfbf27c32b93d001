"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Course reference data
  2xxx: Round / score table
  3xxx: Wagers
  4xxx: Players
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Course ---

class CourseNotFoundError(AppError):
    def __init__(self, course_id: str) -> None:
        super().__init__(1001, f"Course not found: {course_id}", 404)


class TeeBoxNotFoundError(AppError):
    def __init__(self, name: str) -> None:
        super().__init__(1002, f"Tee box not found: {name}", 404)


class InvalidTeeBoxError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(1003, f"Invalid tee box: {detail}", 422)


# --- 2xxx: Round ---

class TeeBoxNotSelectedError(AppError):
    def __init__(self) -> None:
        super().__init__(2001, "No tee box selected for the round", 422)


class InvalidHoleError(AppError):
    def __init__(self, hole_number: int) -> None:
        super().__init__(2002, f"Hole number must be between 1 and 18, got {hole_number}", 422)


class ScoreImportRejectedError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(2003, f"Score import rejected: {detail}", 409)


class InvalidGroupError(AppError):
    def __init__(self, group_index: int) -> None:
        super().__init__(2004, f"Invalid group index: {group_index}", 422)


# --- 3xxx: Wagers ---

class WagerNotFoundError(AppError):
    def __init__(self, wager_id: str) -> None:
        super().__init__(3001, f"Wager not found: {wager_id}", 404)


class InvalidWagerError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(3002, f"Invalid wager: {detail}", 422)


class InvalidOutcomeError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(3003, f"Invalid putting outcome: {detail}", 422)


# --- 4xxx: Players ---

class PlayerNotFoundError(AppError):
    def __init__(self, player_id: str) -> None:
        super().__init__(4001, f"Player not found: {player_id}", 404)
