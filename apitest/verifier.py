# Copyright 2024 The apitest Authors. All rights reserved.
# Licensed under the Apache License Version 2.0 that can be found in the
# LICENSE file in the root directory of this source tree.

from abc import ABC, abstractmethod

from apitest import assertions
from apitest.reporter import TestingT


class Verifier(ABC):
    """
    The assertion interface allowing consumers to inject a custom assertion implementation.
    It also allows failure scenarios of apitest itself to be tested.
    """

    @abstractmethod
    def equal(self, t: TestingT, expected, actual, *msg_and_args) -> bool:
        raise NotImplementedError

    @abstractmethod
    def json_eq(self, t: TestingT, expected: str, actual: str, *msg_and_args) -> bool:
        raise NotImplementedError

    @abstractmethod
    def fail(self, t: TestingT, failure_message: str, *msg_and_args) -> bool:
        raise NotImplementedError

    @abstractmethod
    def no_error(self, t: TestingT, err, *msg_and_args) -> bool:
        raise NotImplementedError


class DefaultVerifier(Verifier):

    def equal(self, t, expected, actual, *msg_and_args):
        """asserts that two objects are equal"""
        return assertions.equal(t, expected, actual, *msg_and_args)

    def json_eq(self, t, expected, actual, *msg_and_args):
        """asserts that two JSON strings are equivalent"""
        return assertions.json_eq(t, expected, actual, *msg_and_args)

    def fail(self, t, failure_message, *msg_and_args):
        return assertions.fail(t, failure_message, *msg_and_args)

    def no_error(self, t, err, *msg_and_args):
        """asserts that a function returned no error"""
        return assertions.no_error(t, err, *msg_and_args)


class NoopVerifier(Verifier):
    """A verifier that does not perform verification, every method returns True."""

    def equal(self, *args, **kwargs):
        return True

    def json_eq(self, *args, **kwargs):
        return True

    def fail(self, *args, **kwargs):
        return True

    def no_error(self, *args, **kwargs):
        return True


def new_default_verifier() -> Verifier:
    return DefaultVerifier()
