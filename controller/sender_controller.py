import logging

from typing import Any, List, Mapping, Optional

from models.sender_model import SenderModel

from utils.exceptions import UnknownAttributeError

logger = logging.getLogger(__name__)

class SenderController:
    """
    Controller for building payment senders from named options.
    """

    def __init__(self):
        logger.info("[INIT] SenderController initialized")

    def build_sender(self, options: Optional[Mapping[str, Any]] = None) -> SenderModel:
        """
        Build a sender from an options mapping.

        Args:
            options (Optional[Mapping[str, Any]]): Attribute names and values.

        Returns:
            SenderModel: The populated sender.

        Raises:
            UnknownAttributeError: If a key has no writable attribute on the sender.
        """
        keys = sorted(str(k) for k in (options or {}))
        try:
            sender = SenderModel(options)
        except UnknownAttributeError as e:
            logger.error(f"[ERRO] Could not build sender: {e}")
            raise

        logger.info(f"[SERVICE] Sender built with options: {', '.join(keys) or '(none)'}")

        return sender

    def accepted_options(self) -> List[str]:
        """
        List the option keys a sender accepts.

        Returns:
            List[str]: Writable attribute names of the sender.
        """
        return list(SenderModel.writable_attributes())
