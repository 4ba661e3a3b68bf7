from .tokens import issue_token, validate_token

__all__ = ["issue_token", "validate_token"]
