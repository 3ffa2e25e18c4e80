# ============================================================================
# CONFIGURATION CLASS
# ============================================================================


class Config:
    """Library-wide defaults with validation"""

    # Numeral system
    RADIX: int = 6
    DIGITS: str = "012345"
    MIDPOINT_DIGIT: int = 3

    # Integer parsing: "conservative" rejects on digit count before
    # accumulating, "checked" only rejects values out of range.
    OVERFLOW_CHECK: str = "conservative"
    OVERFLOW_CHECKS: tuple = ("conservative", "checked")

    # Float formatting: output length in characters (sign excluded),
    # keyed by float width in bits.
    FLOAT_LENGTH: dict = {32: 11, 64: 20}

    # Largest whole part formatted directly; larger magnitudes are
    # shifted down one seximal place at a time.
    WHOLE_PART_LIMIT: int = 2**128 - 1

    # Cross-width integer casts
    CAST_POLICY: str = "wrap"

    @classmethod
    def validate(cls):
        """Validate configuration on import"""
        if cls.RADIX != len(cls.DIGITS):
            raise ValueError("DIGITS must hold exactly RADIX symbols")
        if not 0 < cls.MIDPOINT_DIGIT < cls.RADIX - 1:
            raise ValueError("MIDPOINT_DIGIT must be an inner digit")
        if cls.OVERFLOW_CHECK not in cls.OVERFLOW_CHECKS:
            raise ValueError(f"OVERFLOW_CHECK must be one of {cls.OVERFLOW_CHECKS}")
        for bits, length in cls.FLOAT_LENGTH.items():
            # Room for "0." and one fractional digit.
            if length < 3:
                raise ValueError(f"FLOAT_LENGTH for {bits}-bit floats must be at least 3")
        if cls.WHOLE_PART_LIMIT < cls.RADIX:
            raise ValueError("WHOLE_PART_LIMIT must be at least RADIX")
        if cls.CAST_POLICY != "wrap":
            raise ValueError("CAST_POLICY must be 'wrap'")


# ============================================================================
# SINGLETON INSTANCE
# ============================================================================

config = Config()
config.validate()
