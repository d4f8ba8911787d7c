# Number of snapshots kept in memory.
HISTORY_CAPACITY = 100

# Seconds between two clipboard samples.
POLL_INTERVAL = 0.25

# Returned by the cache when nothing has been observed yet.
EMPTY_SNAPSHOT = ""
