"""Data entry validator classes."""

from textual import validation

from blockdate.model import dates


class DateValidator(validation.Validator):
    """Validate user input."""

    def validate(self, value: str) -> validation.ValidationResult:
        """Verify input is a canonical YYYY-MM-DD date."""
        if dates.validate(value) is None:
            return self.failure(f"{value!r} is not a valid YYYY-MM-DD date.")
        return self.success()
