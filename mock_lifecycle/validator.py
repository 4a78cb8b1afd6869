"""Static-method holder used as a static mocking target."""


class Validator:
    @staticmethod
    def validate_positive(value: int) -> None:
        # do nothing
        pass
