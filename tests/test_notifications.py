"""
Notifier and exception handler tests.
"""
from shared.domain.exceptions import StorageError, ValidationError
from shared.interfaces import Notifier, NotificationLevel, handle_domain_exception
from apps.orders.domain.exceptions import CheckoutValidationError, EmptyCartError


class TestNotifier:
    def test_subscribers_receive_notifications(self):
        notifier = Notifier()
        received = []
        unsubscribe = notifier.subscribe(received.append)

        notifier.success("Added")
        unsubscribe()
        notifier.error("Failed")

        assert [n.message for n in received] == ["Added"]
        assert notifier.last.level == NotificationLevel.ERROR

    def test_failing_subscriber_does_not_block_others(self, caplog):
        notifier = Notifier()
        received = []
        notifier.subscribe(lambda n: 1 / 0)
        notifier.subscribe(received.append)

        notifier.info("Saved")

        assert [n.message for n in received] == ["Saved"]
        assert notifier.last.message == "Saved"
        assert any("Notification subscriber failed" in r.getMessage() for r in caplog.records)

    def test_history_is_bounded(self):
        notifier = Notifier(history_limit=3)
        for i in range(5):
            notifier.info(f"message {i}")

        assert [n.message for n in notifier.history] == ["message 2", "message 3", "message 4"]


class TestHandleDomainException:
    def test_validation_error_carries_every_field(self):
        notifier = Notifier()
        error = CheckoutValidationError({'phone': ['bad'], 'address': ['short']})

        result = handle_domain_exception(error, notifier)

        assert not result.success
        assert result.error_code == 'VALIDATION_ERROR'
        assert result.details['errors'] == {'phone': ['bad'], 'address': ['short']}
        assert notifier.last.level == NotificationLevel.ERROR

    def test_single_field_validation_error(self):
        error = ValidationError("Required", field='name')

        assert error.fields == ['name']

    def test_storage_error_is_a_warning(self):
        notifier = Notifier()

        result = handle_domain_exception(StorageError('tinystepsbd_cart', 'disk full'), notifier)

        assert result.details == {'key': 'tinystepsbd_cart'}
        assert notifier.last.level == NotificationLevel.WARNING

    def test_other_errors(self):
        notifier = Notifier()

        result = handle_domain_exception(EmptyCartError(), notifier)

        assert result.error_code == 'EMPTY_CART'
        assert notifier.last.code == 'EMPTY_CART'
