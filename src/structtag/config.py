class GrammarConfig:
    KEY_VALUE_SEPARATOR: str = ":"
    QUOTE: str = '"'
    ESCAPE: str = "\\"
    OPTION_SEPARATOR: str = ","
    TAG_SEPARATOR: str = " "

    CLI_LOG_LEVEL: str = "WARNING"
    CLI_VERBOSE_LOG_LEVEL: str = "DEBUG"

    @classmethod
    def validate_config(cls) -> None:
        """Validate that the grammar delimiters are usable together."""

        delimiters = {
            "KEY_VALUE_SEPARATOR": cls.KEY_VALUE_SEPARATOR,
            "QUOTE": cls.QUOTE,
            "ESCAPE": cls.ESCAPE,
            "OPTION_SEPARATOR": cls.OPTION_SEPARATOR,
            "TAG_SEPARATOR": cls.TAG_SEPARATOR,
        }
        for name, value in delimiters.items():
            if len(value) != 1:
                raise ValueError(
                    f"{name} must be a single character, got {value!r}"
                )

        if len(set(delimiters.values())) != len(delimiters):
            raise ValueError(f"Grammar delimiters must be distinct, got {delimiters}")

        levels = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
        for level in (cls.CLI_LOG_LEVEL, cls.CLI_VERBOSE_LOG_LEVEL):
            if level not in levels:
                raise ValueError(f"Unknown log level {level!r}")


GrammarConfig.validate_config()


def get_option_separator() -> str:
    """Get the character separating name and options inside a value."""
    return GrammarConfig.OPTION_SEPARATOR


def get_cli_log_level(verbose: bool = False) -> str:
    """Get the log level used by the command line front end."""
    if verbose:
        return GrammarConfig.CLI_VERBOSE_LOG_LEVEL
    return GrammarConfig.CLI_LOG_LEVEL
