# Copyright 2024 The apitest Authors. All rights reserved.
# Licensed under the Apache License Version 2.0 that can be found in the
# LICENSE file in the root directory of this source tree.

import logging
from abc import ABC, abstractmethod

from apitest.exceptions import FatalError


def sprintf(format, *args):
    return format % args if args else format


class TestingT(ABC):
    """
    The capability used to record failed assertions and abort the running test.
    Wrap the hosting test framework with a subclass to plug it into a verifier.
    """

    __test__ = False

    @abstractmethod
    def errorf(self, format, *args):
        raise NotImplementedError

    @abstractmethod
    def fatal(self, *args):
        raise NotImplementedError

    @abstractmethod
    def fatalf(self, format, *args):
        raise NotImplementedError


class RecordingT(TestingT):

    def __init__(self, name=None):
        self.name = name
        self.errors = []

    def __str__(self):
        return f'{self.name or "test"}(failed: {self.failed})'

    @property
    def failed(self):
        return bool(self.errors)

    def errorf(self, format, *args):
        message = sprintf(format, *args)
        logging.debug(f'{self} recorded an error: {message}')
        self.errors.append(message)

    def fatal(self, *args):
        self._abort(' '.join(str(a) for a in args))

    def fatalf(self, format, *args):
        self._abort(sprintf(format, *args))

    def _abort(self, message):
        self.errors.append(message)
        raise FatalError(message)
