from solidpod.context import PodContext
from solidpod.pod import OperationResult


class BaseCommand:
    def __init__(self, context: PodContext = None):
        self.context = context
        self.result = None

    def check(self, result: OperationResult) -> OperationResult:
        """Store the result, and raise a `RuntimeError` if it is a failure."""
        self.result = result
        if not result.ok:
            raise RuntimeError(str(result.error)) from result.error
        return result
