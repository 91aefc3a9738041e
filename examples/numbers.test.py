"""Numbers - basic matchers.

Run with:
    ormond examples/numbers.test.py
"""

from ormond import describe, expect, it


def numbers():
    it("should confirm integers are equal", lambda: expect(42).is_type(int).is_eq(42))

    def comparison_operators():
        a, b = 10, 20
        expect(a).is_lt(b).is_le(b)
        expect(b).is_gt(a).is_ge(a)

    it("should confirm integer comparison operators", comparison_operators)
    it("should detect inequality", lambda: expect(100).not_.is_eq(200))
    it("should compare rounded floats", lambda: expect(round(3.14159, 2)).is_eq(3.14))
    it("should be between bounds (inclusive)", lambda: expect(72).is_between(70, 75))

    def failing_matcher_message():
        try:
            expect(999).is_between(1, 100)
        except AssertionError as err:
            expect(str(err)).is_substr("between")
        else:
            raise AssertionError("is_between should have failed")

    it("should describe the failure", failing_matcher_message)


describe("Numbers - Basic Testing", numbers)
