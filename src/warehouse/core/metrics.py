from prometheus_client import Counter

INVENTORY_OPERATIONS = Counter(
    "inventory_operations_total",
    "Total number of inventory operations",
    ["operation", "outcome"],
)

STORAGE_WRITES = Counter(
    "inventory_storage_writes_total",
    "Total number of inventory document writes",
    ["status"],
)

AUTH_ATTEMPTS = Counter("auth_attempts_total", "Total number of login attempts", ["outcome"])
