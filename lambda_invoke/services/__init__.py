from .lambda_invoker import LambdaInvoker
from .transport import Boto3LambdaTransport, LambdaTransport

__all__ = ["LambdaInvoker", "Boto3LambdaTransport", "LambdaTransport"]
