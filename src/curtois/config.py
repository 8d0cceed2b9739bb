from dataclasses import dataclass


@dataclass
class ParserConfig:

    # Text decoding of the instance file (accepts a leading BOM)
    ENCODING: str = "utf-8-sig"

    # Lines starting with this marker are ignored everywhere
    COMMENT_MARKER: str = "#"

    ### DELIMITERS ###

    # Separates the fields of a row
    FIELD_DELIMITER: str = ","

    # Separates items of a list-valued field (forbidden successors, max shifts)
    LIST_DELIMITER: str = "|"

    # Separates key and value of a pair (shift id = max count)
    PAIR_DELIMITER: str = "="

    # Prefix shared by every section header line
    SECTION_PREFIX: str = "SECTION_"

    def validate(self):
        """
        Validate the ParserConfig object has sensible values before parsing.
        """
        if not self.ENCODING:
            raise ValueError("ENCODING must be a non-empty codec name.")
        if not self.SECTION_PREFIX:
            raise ValueError("SECTION_PREFIX must be non-empty.")
        delimiters = (
            "COMMENT_MARKER",
            "FIELD_DELIMITER",
            "LIST_DELIMITER",
            "PAIR_DELIMITER",
        )
        for attr in delimiters:
            val = getattr(self, attr)
            if len(val) != 1 or val.isspace():
                raise ValueError(f"{attr} must be a single non-blank character.")
        values = [getattr(self, attr) for attr in delimiters]
        if len(set(values)) != len(values):
            raise ValueError(
                "COMMENT_MARKER and the delimiters must be distinct characters."
            )


cfg = ParserConfig()
