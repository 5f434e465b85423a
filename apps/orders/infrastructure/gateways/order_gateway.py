"""
Order submission over the storefront API.
"""
import concurrent.futures
import logging
from typing import Any

from shared.infrastructure.http import (
    StorefrontApiClient,
    ApiTimeoutError,
    ApiConnectionError,
    ApiResponseError,
    OpaqueResponseError,
)
from ...domain.exceptions import OrderRejectedError, OrderNetworkError, OrderTimeoutError
from ...domain.repositories.order_gateway import OrderGateway, SubmissionReceipt
from ...domain.value_objects.order_number import OrderNumber
from ...domain.value_objects.order_request import OrderRequest
from ...interfaces.serializers import OrderRequestSerializer

logger = logging.getLogger(__name__)


class RemoteOrderGateway(OrderGateway):
    """
    POSTs ``action=create_order`` and classifies the outcome.

    The request runs on a worker thread and races ``timeout``. When the
    timeout wins the worker is abandoned and whatever it receives later is
    discarded.

    A 2xx answer that cannot be read is rejected unless ``allow_unconfirmed``
    is set, in which case the order is accepted under a local order number
    and marked unconfirmed.
    """

    def __init__(
        self,
        api_client: StorefrontApiClient,
        timeout: float = 15,
        allow_unconfirmed: bool = False,
        action: str = 'create_order',
    ):
        self.api_client = api_client
        self.timeout = timeout
        self.allow_unconfirmed = allow_unconfirmed
        self.action = action

    def submit(self, request: OrderRequest) -> SubmissionReceipt:
        payload = dict(OrderRequestSerializer(request).data)
        logger.info(f"Submitting order: {request.item_count} items, total {request.total_amount}")

        executor = concurrent.futures.ThreadPoolExecutor(max_workers=1, thread_name_prefix='order-submit')
        try:
            future = executor.submit(self.api_client.post, self.action, payload, timeout=self.timeout)
            body = future.result(timeout=self.timeout)
        except concurrent.futures.TimeoutError as e:
            logger.error(f"Order submission timed out after {self.timeout}s")
            raise OrderTimeoutError(self.timeout) from e
        except ApiTimeoutError as e:
            raise OrderTimeoutError(self.timeout) from e
        except ApiConnectionError as e:
            raise OrderNetworkError(e.message) from e
        except OpaqueResponseError as e:
            return self._unconfirmed(request, e.message)
        except ApiResponseError as e:
            raise OrderRejectedError(f"The shop returned an error ({e.status_code}). Please try again.") from e
        finally:
            executor.shutdown(wait=False)

        return self._receipt(request, body)

    def _receipt(self, request: OrderRequest, body: Any) -> SubmissionReceipt:
        if not isinstance(body, dict):
            return self._unconfirmed(request, f"unexpected body type {type(body).__name__}")

        if body.get('success') is not True:
            reason = str(body.get('error') or '')
            logger.warning(f"Order rejected by the shop: {reason or 'no reason given'}")
            raise OrderRejectedError(reason)

        data = body.get('data')
        order_id = data.get('order_id') if isinstance(data, dict) else None
        if not order_id:
            return self._unconfirmed(request, "response carries no order id")

        total_amount = data.get('total_amount')
        if isinstance(total_amount, bool) or not isinstance(total_amount, (int, float)):
            total_amount = request.total_amount

        logger.info(f"Order {order_id} confirmed")
        return SubmissionReceipt(
            order_number=OrderNumber(value=str(order_id)),
            total_amount=int(total_amount),
        )

    def _unconfirmed(self, request: OrderRequest, reason: str) -> SubmissionReceipt:
        if not self.allow_unconfirmed:
            logger.error(f"Order response could not be read: {reason}")
            raise OrderRejectedError("The shop's response could not be read. Please try again.")

        order_number = OrderNumber.generate_local()
        logger.warning(f"Order response could not be read ({reason}), recorded as {order_number} unconfirmed")
        return SubmissionReceipt(
            order_number=order_number,
            total_amount=request.total_amount,
            confirmed=False,
        )
