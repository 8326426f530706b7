class ScoringError(Exception):
    pass


class InvalidHoleLayoutError(ScoringError, ValueError):
    pass


class IncompleteMatchError(ScoringError):
    def __init__(self, missing: list[tuple[str, str]]):
        self.missing = missing
        super().__init__(
            f"Cannot finalize: {len(missing)} hole score(s) have not been entered."
        )


class MatchAlreadyFinalizedError(ScoringError):
    pass
