class AdvisorError(Exception):
    """The career advisor could not produce a reply."""

    status = 500
    kind = "error"
    user_message = "Failed to get AI response. Please try again."

    def __init__(self, message="", status=None):
        super().__init__(message or self.user_message)
        if status is not None:
            self.status = status


class RateLimited(AdvisorError):
    status = 429
    kind = "rate_limited"
    user_message = "Rate limit exceeded. Please wait a moment before trying again."


class PaymentRequired(AdvisorError):
    status = 402
    kind = "payment_required"
    user_message = "Payment required. Please contact support to continue using AI features."
