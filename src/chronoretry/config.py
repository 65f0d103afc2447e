r"""Registry of named retry policies.

A ``PolicyRegistry`` is a plain object passed explicitly to the code that
needs it. It is meant to be filled at start-up and only read afterwards.
Named policies inherit every setting they do not override from the
registry's default policy.

For applications that prefer a single registry, ``get_default_registry``
returns a process-wide instance created on first use. It is never replaced
implicitly: ``reset_default_registry`` is the only way to swap it, and is
meant for test scaffolding.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_POLICY_NAME",
    "PolicyRegistry",
    "get_default_registry",
    "reset_default_registry",
]

import logging
import threading
from typing import TYPE_CHECKING, Any

from chronoretry.exceptions import UnknownPolicyError
from chronoretry.policy import Policy

if TYPE_CHECKING:
    from collections.abc import Iterator

logger: logging.Logger = logging.getLogger(__name__)

DEFAULT_POLICY_NAME = "default"


class PolicyRegistry:
    """In-memory registry of named retry policies.

    Args:
        default: The default policy. Defaults to ``Policy()``.

    Example:
        ```pycon
        >>> from chronoretry.config import PolicyRegistry
        >>> registry = PolicyRegistry()
        >>> policy = registry.define_policy("aggressive", max_attempts=5, base_delay=0.01)
        >>> registry.get_policy("aggressive").max_attempts
        5
        >>> registry.get_policy("aggressive").multiplier  # Inherited from the default
        2.0
        >>> registry.get_policy("missing")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        chronoretry.exceptions.UnknownPolicyError: Policy 'missing' not found.

        ```
    """

    def __init__(self, default: Policy | None = None) -> None:
        self._lock = threading.Lock()
        self._policies: dict[str, Policy] = {
            DEFAULT_POLICY_NAME: default if default is not None else Policy()
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(names={self.names()})"

    def __contains__(self, name: object) -> bool:
        return name in self._policies

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._policies)

    @property
    def default_policy(self) -> Policy:
        """The policy named ``DEFAULT_POLICY_NAME``."""
        return self._policies[DEFAULT_POLICY_NAME]

    def define_policy(self, name: str, policy: Policy | None = None, **options: Any) -> Policy:
        """Register a policy under a name, replacing any previous one.

        Args:
            name: The policy name. Redefining ``DEFAULT_POLICY_NAME`` changes
                the base of the policies defined afterwards.
            policy: Optional base policy. Defaults to the default policy.
            **options: Policy fields overriding the base policy.

        Returns:
            The registered policy.

        Raises:
            TypeError: If an option does not name a policy field.
            ValueError: If an option value is invalid.
        """
        base = policy if policy is not None else self.default_policy
        merged = base.merge(**options)
        with self._lock:
            previous = self._policies.get(name)
            self._policies[name] = merged
        if previous is not None:
            logger.debug(f"Replaced retry policy '{name}'")
        return merged

    def get_policy(self, name: str) -> Policy:
        """Return the policy registered under a name.

        Args:
            name: The policy name.

        Returns:
            The registered policy.

        Raises:
            UnknownPolicyError: If no policy is registered under ``name``.
        """
        try:
            return self._policies[name]
        except KeyError:
            raise UnknownPolicyError(name) from None

    def has_policy(self, name: str) -> bool:
        """Return ``True`` if a policy is registered under ``name``."""
        return name in self._policies

    def remove_policy(self, name: str) -> Policy:
        """Remove a named policy.

        Args:
            name: The policy name.

        Returns:
            The removed policy.

        Raises:
            UnknownPolicyError: If no policy is registered under ``name``.
            ValueError: If ``name`` is ``DEFAULT_POLICY_NAME``.
        """
        if name == DEFAULT_POLICY_NAME:
            msg = f"The '{DEFAULT_POLICY_NAME}' policy cannot be removed"
            raise ValueError(msg)
        with self._lock:
            try:
                return self._policies.pop(name)
            except KeyError:
                raise UnknownPolicyError(name) from None

    def names(self) -> list[str]:
        """Return the registered policy names, in registration order."""
        return list(self._policies)


_default_registry: PolicyRegistry | None = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> PolicyRegistry:
    """Return the process-wide registry, creating it on first use.

    Returns:
        The process-wide registry.

    Example:
        ```pycon
        >>> from chronoretry.config import get_default_registry
        >>> get_default_registry() is get_default_registry()
        True

        ```
    """
    global _default_registry  # noqa: PLW0603
    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = PolicyRegistry()
        return _default_registry


def reset_default_registry(registry: PolicyRegistry | None = None) -> PolicyRegistry:
    """Replace the process-wide registry.

    Args:
        registry: The new registry. Defaults to an empty ``PolicyRegistry``.

    Returns:
        The new process-wide registry.
    """
    global _default_registry  # noqa: PLW0603
    with _default_registry_lock:
        _default_registry = registry if registry is not None else PolicyRegistry()
        return _default_registry
