import logging

from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from utils.exceptions import UnknownAttributeError

logger = logging.getLogger(__name__)

class OptionsModel:
    """
    Base model populated from a mapping of named options.

    Every property that has a setter is writable from the options mapping.
    The name -> setter table is built once per class when it is defined, so
    adding an attribute only means adding a property.

    Args:
        options (Optional[Mapping[str, Any]]): Attribute names and the values to apply.

    Raises:
        UnknownAttributeError: On the first key with no writable attribute.
    """
    _setters: Dict[str, Callable[[Any, Any], None]] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        setters = {}
        # Walk bases first so any later member of the same name replaces a parent's setter.
        for klass in reversed(cls.__mro__):
            for name, member in vars(klass).items():
                if isinstance(member, property) and member.fset is not None:
                    setters[name] = member.fset
                else:
                    setters.pop(name, None)

        cls._setters = setters

    def __init__(self, options: Optional[Mapping[str, Any]] = None):
        for key, value in (options or {}).items():
            setter = self._setters.get(key)
            if setter is None:
                logger.warning(f"[MODEL] Unknown option for {type(self).__name__}: {key}")
                raise UnknownAttributeError(key, type(self).__name__)

            setter(self, value)
            logger.debug(f"[MODEL] {type(self).__name__}.{key} set")

    @classmethod
    def writable_attributes(cls) -> Tuple[str, ...]:
        """
        Names accepted as option keys, in declaration order.

        Returns:
            Tuple[str, ...]: The writable attribute names.
        """
        return tuple(cls._setters)
