"""Simple example of using matchkit string assertions."""

import re

from matchkit import AssertionFailedError, Outcome, outcomes_collector, should, should_not
from matchkit.assertions.string import should_contain_in_order, should_have_line_count
from matchkit.matchers import string as m


# 1. Define your system under test
def render_receipt(items: list[tuple[str, int]]) -> str:
    """Render one line per item followed by a total."""
    lines = [f"{name}: {price}" for name, price in items]
    lines.append(f"TOTAL: {sum(price for _, price in items)}")
    return "\n".join(lines)


receipt = render_receipt([("apple", 3), ("bread", 5)])

# 2. Helpers raise on failure
should_have_line_count(receipt, 2)
should_contain_in_order(receipt, "apple", "bread", "TOTAL")

# 3. Apply labelled matchers, collecting every outcome
checks = [
    ("total line format", should, receipt.splitlines()[-1], m.match(r"TOTAL: \d+")),
    ("lists bread price", should, receipt, m.contain(re.compile(r"bread: \d"))),
    ("not blank", should_not, receipt, m.be_blank()),
    ("fits in 10 chars", should, receipt, m.have_max_length(10)),
]

outcomes: list[Outcome] = []
results: list[tuple[str, str | None]] = []
with outcomes_collector(outcomes):
    for label, apply, subject, matcher in checks:
        try:
            apply(subject, matcher)
            results.append((label, None))
        except AssertionFailedError as exc:
            results.append((label, str(exc)))

# 4. Show individual results
print(f"\nDetailed Results ({len(outcomes)} outcomes recorded):")
for label, error in results:
    status = "✓" if error is None else "✗"
    print(f"{status} {label}: {error or 'passed'}")
