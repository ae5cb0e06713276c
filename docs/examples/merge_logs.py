"""Merge timestamped log streams and browse the errors."""

import time
import seqiter


def read_log(name, n):
    # simulates a slow source of (timestamp, source, message) records
    for i in range(n):
        time.sleep(.001)
        yield (i * 3 + len(name) % 3, name, "error" if i % 7 == 0 else "ok")


sources = [read_log(name, 100) for name in ['web', 'db', 'cache', 'auth']]
merged = seqiter.collated(sources, lambda a, b: a[0] - b[0])
errors = seqiter.filtered(merged, lambda record: record[2] == "error")
messages = seqiter.transformed(
    errors, lambda record: "{:4d} [{}]".format(record[0], record[1]))

# only the records needed for the first screen are read
browser = seqiter.to_list_iterator(messages)

t1 = time.time()
first_page = [browser.next() for _ in range(5)]
t2 = time.time()
print("first page loaded in {:.3f}s".format(t2 - t1))
print("\n".join(first_page))

# going back does not read the logs again
browser.previous()
browser.previous()
print("back to:", browser.next())

t1 = time.time()
remaining = list(browser)
t2 = time.time()
print("{} more errors loaded in {:.3f}s".format(len(remaining), t2 - t1))
