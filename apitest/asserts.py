# Copyright 2024 The apitest Authors. All rights reserved.
# Licensed under the Apache License Version 2.0 that can be found in the
# LICENSE file in the root directory of this source tree.

import logging
from typing import Any, Callable, Optional

from apitest.common.http_status import client_error, server_error, success
from apitest.exceptions import StatusCodeError
from apitest.reporter import TestingT
from apitest.verifier import Verifier

# (response, request) -> None on success, otherwise an error describing the mismatch
Assert = Callable[[Any, Any], Optional[Exception]]


def is_success(response, request) -> Optional[Exception]:
    """asserts on a range of happy path status codes"""
    if success(response.status_code):
        return None
    return StatusCodeError(f'not success. Status code={response.status_code}', response.status_code)


def is_client_error(response, request) -> Optional[Exception]:
    """asserts on a range of client error status codes"""
    if client_error(response.status_code):
        return None
    return StatusCodeError(f'not a client error. Status code={response.status_code}', response.status_code)


def is_server_error(response, request) -> Optional[Exception]:
    """asserts on a range of server error status codes"""
    if server_error(response.status_code):
        return None
    return StatusCodeError(f'not a server error. Status code={response.status_code}', response.status_code)


def run_asserts(verifier: Verifier, t: TestingT, response, *asserts: Assert, request=None) -> bool:
    """
    Evaluate every assert against the response and report each result through the verifier.
    The request defaults to the one that produced the response, if the response carries it.
    @return: True if all asserts passed
    """
    if request is None:
        try:
            request = response.request
        except (AttributeError, RuntimeError):
            # httpx raises RuntimeError for responses built without a request
            request = None

    passed = True
    for assert_func in asserts:
        err = assert_func(response, request)
        if err is not None:
            logging.debug(f'{getattr(assert_func, "__name__", assert_func)} failed: {err}')
        if not verifier.no_error(t, err):
            passed = False
    return passed
