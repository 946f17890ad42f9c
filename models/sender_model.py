from typing import Any, Mapping, Optional

from models.options_model import OptionsModel

class SenderModel(OptionsModel):
    """
    Model representing the sender of a payment.

    Setters are not thread-safe when one instance is shared between threads.

    Args:
        options (Optional[Mapping[str, Any]]): Initial values keyed by attribute name.

    Attributes:
        account (str): Identifier of the paying account.
        client_ip (str): Address of the client that started the payment.
    """
    def __init__(self, options: Optional[Mapping[str, Any]] = None):
        self._account = None
        self._client_ip = None
        super().__init__(options)

    @property
    def account(self):
        return self._account

    @account.setter
    def account(self, value):
        self._account = value

    @property
    def client_ip(self):
        return self._client_ip

    @client_ip.setter
    def client_ip(self, value):
        self._client_ip = value
