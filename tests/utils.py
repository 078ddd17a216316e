from apitest.reporter import TestingT, sprintf


class MockT(TestingT):
    """
    Counts every reporter call and never aborts, so fatal paths can be observed without stopping the test.
    """

    def __init__(self):
        self.errors = []
        self.fatal_calls = 0

    @property
    def error_calls(self):
        return len(self.errors)

    @property
    def calls(self):
        return self.error_calls + self.fatal_calls

    def errorf(self, format, *args):
        self.errors.append(sprintf(format, *args))

    def fatal(self, *args):
        self.fatal_calls += 1

    def fatalf(self, format, *args):
        self.fatal_calls += 1


class Response:

    def __init__(self, status_code):
        self.status_code = status_code
