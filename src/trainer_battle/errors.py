class TrainerBattleError(Exception):
    """Base for all trainer battle errors."""


class PokemonConstructionError(TrainerBattleError, ValueError):
    """A creature could not be built from the given species, moves, CP and IVs."""

    def __init__(self, detail: str, suggestions: list | None = None):
        self.detail = detail
        self.suggestions = list(suggestions or [])
        message = detail
        if self.suggestions:
            hints = ", ".join(f"({s.attack}, {s.defense}, {s.stamina})" for s in self.suggestions)
            message = f"{detail}; did you mean IVs {hints}?"
        super().__init__(message)


class UnknownSpeciesError(PokemonConstructionError):
    def __init__(self, key: str | int):
        super().__init__(f"Unknown species '{key}'")
        self.key = key


class UnknownMoveError(PokemonConstructionError):
    def __init__(self, key: str | int, kind: str = "move"):
        super().__init__(f"Unknown {kind} '{key}'")
        self.key = key
        self.kind = kind


class ForcedSwitchError(TrainerBattleError, RuntimeError):
    """A forced switch was required but no roster slot could take the field."""

    def __init__(self, player_name: str):
        super().__init__(f"Player '{player_name}' has no creature to switch in")
        self.player_name = player_name
