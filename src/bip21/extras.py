"""Extras types: the empty default and pydantic-backed parameters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Iterator

from pydantic import BaseModel, ConfigDict

from .de import ParamKind
from .param import Param

# ============================================================================
# NoExtras
# ============================================================================


class NoExtrasError(Exception):
    """Error type of ``NoExtras``; parsing without extras can not fail this way."""

    def __new__(cls, *args: Any, **kwargs: Any) -> NoExtrasError:
        raise TypeError("NoExtrasError can not be instantiated")


@dataclass(frozen=True)
class NoExtras:
    """Extras type for URIs that carry no extra parameters.

    Every extra parameter is reported unknown, so non-required ones are
    ignored and ``req-`` ones are rejected.
    """

    error_type: ClassVar[type[BaseException]] = NoExtrasError

    @classmethod
    def deserialization_state(cls) -> EmptyState:
        return EmptyState()

    def serialize_params(self) -> Iterator[tuple[str, str]]:
        return iter(())


class EmptyState:
    """Deserialization state of ``NoExtras``; it expects no parameters."""

    def is_param_known(self, key: str) -> bool:
        return False

    def deserialize_temp(self, key: str, value: Param) -> ParamKind:
        return ParamKind.UNKNOWN

    def deserialize_borrowed(self, key: str, value: Param) -> ParamKind:
        return ParamKind.UNKNOWN

    def finalize(self) -> NoExtras:
        return NoExtras()


# ============================================================================
# Pydantic models
# ============================================================================


class ModelParams(BaseModel):
    """Base class for extras described by a pydantic model.

    Each field is a parameter keyed by its alias (or name). Values are decoded
    as text and validated by pydantic once all parameters were seen, so
    missing mandatory fields and bad values surface as ``ExtrasError``.

    Example:
        ```python
        class PayjoinParams(ModelParams):
            endpoint: str = Field(alias="pj")
            disable_output_substitution: bool = Field(False, alias="pjos")

        uri = Uri.parse("bitcoin:...?pj=https://example.com/pj", PayjoinParams)
        uri.extras.endpoint  # "https://example.com/pj"
        ```
    """

    error_type: ClassVar[type[BaseException]] = ValueError

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def param_keys(cls) -> frozenset[str]:
        return frozenset(info.alias or name for name, info in cls.model_fields.items())

    @classmethod
    def deserialization_state(cls) -> ModelState:
        return ModelState(cls)

    def serialize_params(self) -> Iterator[tuple[str, str]]:
        dumped = self.model_dump(by_alias=True, exclude_defaults=True, mode="json")
        for key, value in dumped.items():
            if value is not None:
                yield key, _render(value)


class ModelState:
    """Collects the known parameters of a ``ModelParams`` subclass."""

    def __init__(self, model: type[ModelParams]):
        self._model = model
        self._keys = model.param_keys()
        self._values: dict[str, str] = {}
        self._finalized = False

    def is_param_known(self, key: str) -> bool:
        return key in self._keys

    def deserialize_temp(self, key: str, value: Param) -> ParamKind:
        self._ensure_open()
        if key not in self._keys:
            return ParamKind.UNKNOWN
        self._values[key] = value.to_str()
        return ParamKind.KNOWN

    def finalize(self) -> ModelParams:
        self._ensure_open()
        self._finalized = True
        return self._model.model_validate(self._values)

    def _ensure_open(self) -> None:
        if self._finalized:
            raise RuntimeError(f"{self._model.__name__} state was already finalized")


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)
