from memory_match.components.board_config import BoardConfig


class InvalidConfiguration(ValueError):
    """Raised when a game is started with a config that fails ``is_valid()``.

    Recoverable: adjust the parameters (``validate_and_adjust``) and retry.
    """

    def __init__(self, config: BoardConfig, message: str | None = None):
        self.config = config
        if message is None:
            message = (
                f"Invalid board configuration: match_count={config.match_count}, "
                f"dots_per_card={config.dots_per_card}, number_of_cards={config.number_of_cards} "
                f"(cards must be within {config.minimum_cards}-{config.maximum_cards})"
            )
        super().__init__(message)
