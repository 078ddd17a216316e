# Copyright 2024 The apitest Authors. All rights reserved.
# Licensed under the Apache License Version 2.0 that can be found in the
# LICENSE file in the root directory of this source tree.


class ApitestException(Exception):
    pass


class FatalError(ApitestException):
    """Raised by a reporter when a test is aborted."""


class StatusCodeError(ApitestException):

    def __init__(self, message, status_code):
        super(StatusCodeError, self).__init__(message)
        self.status_code = status_code
