"""Shared plumbing for the Deepseek client mixins.

Every endpoint mixin funnels through :meth:`DeepseekCommonMixin._call` (retrying,
non-streaming) or :meth:`DeepseekCommonMixin._stream` (single attempt, streamed
body). Both expect ``_config``, ``_http``, ``_builder``, ``_retry`` and
``_logger`` to be set by the concrete client.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel

from ..base.cancellation import CancellationToken
from ..base.errors import invalid_request
from ..base.http import execute, open_stream
from ..base.log_support import LogContext
from ..base.streaming import StreamReader

M = TypeVar("M", bound=BaseModel)
R = TypeVar("R", bound=StreamReader)


def require(value: Any, param: str, message: str = "cannot be empty") -> None:
    """Raise ``INVALID_REQUEST`` for a missing or empty argument."""
    if value is None or (hasattr(value, "__len__") and len(value) == 0):
        raise invalid_request(param, message)


class DeepseekCommonMixin:
    """Request plumbing shared by every endpoint family."""

    @property
    def _log_level(self) -> int:
        return logging.INFO if self._config.debug else logging.DEBUG

    def _call(
        self,
        method: str,
        path: str,
        response_model: Type[M],
        *,
        body: Any = None,
        params: Optional[Mapping[str, Any]] = None,
        cancel: Optional[CancellationToken] = None,
        model: Optional[str] = None,
    ) -> M:
        if cancel is not None:
            cancel.raise_if_cancelled()
        request = self._builder.build(method, path, json_body=body, params=params)
        return execute(
            self._http,
            request,
            response_model,
            retry_config=self._retry,
            cancel=cancel,
            logger=self._logger,
            log_level=self._log_level,
            ctx=LogContext(method=method, path=path, model=model),
        )

    def _stream(
        self,
        path: str,
        body: Any,
        reader_cls: Type[R],
        *,
        cancel: Optional[CancellationToken] = None,
        model: Optional[str] = None,
    ) -> R:
        if cancel is not None:
            cancel.raise_if_cancelled()
        request = self._builder.build("POST", path, json_body=body, stream=True)
        ctx = LogContext(method="POST", path=path, model=model)
        response = open_stream(
            self._http,
            request,
            cancel=cancel,
            logger=self._logger,
            log_level=self._log_level,
            ctx=ctx,
        )
        return reader_cls(
            response,
            cancel=cancel,
            logger=self._logger,
            log_level=self._log_level,
            ctx=ctx,
        )


__all__ = ["DeepseekCommonMixin", "require"]
