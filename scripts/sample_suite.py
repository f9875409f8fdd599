"""Sample test unit exercising every role suiterunner understands.

Run it with::

    suiterunner run scripts/sample_suite.py:SampleSuite
"""

from suiterunner.annotations import (
    after_suite,
    after_test,
    before_suite,
    before_test,
    csv_source,
    test,
)


class SampleSuite:
    @before_suite
    @staticmethod
    def setup_suite():
        print("----Setting up test suite static")

    @after_suite
    @staticmethod
    def teardown_suite():
        print("----Tearing down test suite static")

    @before_test
    def before_each_test(self):
        print("--Before test")

    @after_test
    def after_each_test(self):
        print("--After test")

    @test(priority=1)
    def my_test_priority_1(self):
        print("Running my test priority 1")

    @test(priority=10)
    def my_test_priority_10(self):
        print("Running my test priority 10")

    @test(priority=3)
    @csv_source("5, Java, 15, false")
    def parameterized_test_with_priority(self, a: int, b: str, c: int, d: bool):
        print(f"Running param test with priority 3. Parameters: {a} {b} {c} {d}")

    @test
    @csv_source("10, Java, 20, true")
    def parameterized_test_without_priority(self, a: int, b: str, c: int, d: bool):
        print(f"Running param test with default priority 5. Parameters: {a} {b} {c} {d}")

    @test(priority=2)
    def _my_test_priority_2(self):
        print("Running my test priority 2")

    @test(priority=3)
    def _my_test_priority_3(self):
        print("Running my test priority 3")

    @test(priority=3)
    def _my_test_priority_second_3(self):
        print("Running my test priority second 3")
