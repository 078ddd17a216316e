# Copyright 2024 The apitest Authors. All rights reserved.
# Licensed under the Apache License Version 2.0 that can be found in the
# LICENSE file in the root directory of this source tree.

from apitest.__version__ import __version__
from apitest.asserts import Assert, is_client_error, is_server_error, is_success, run_asserts
from apitest.exceptions import ApitestException, FatalError, StatusCodeError
from apitest.reporter import RecordingT, TestingT
from apitest.verifier import DefaultVerifier, NoopVerifier, Verifier, new_default_verifier

__all__ = [
    '__version__',
    'Assert',
    'is_success',
    'is_client_error',
    'is_server_error',
    'run_asserts',
    'ApitestException',
    'FatalError',
    'StatusCodeError',
    'TestingT',
    'RecordingT',
    'Verifier',
    'DefaultVerifier',
    'NoopVerifier',
    'new_default_verifier',
]
