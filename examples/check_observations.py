from __future__ import annotations

import json
import logging

import pandas as pd

from schemaguard import check_schema, configure_logging
from schemaguard.errors import SchemaValidationError

SCHEMA = {
    "fields": [
        {"name": "id", "type": "integer", "constraints": {"required": True}},
        {"name": "species", "type": "string", "constraints": {"required": True}},
        {"name": "count", "type": "integer"},
    ]
}


def main() -> int:
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    configure_logging("DEBUG")

    observations = pd.DataFrame({"id": [1, 2], "species": ["Anas platyrhynchos", "Ardea cinerea"]})
    check_schema(SCHEMA, observations)

    try:
        check_schema(SCHEMA, observations.assign(count=[3, 1]))
    except SchemaValidationError as exc:
        print(json.dumps(exc.to_dict(), indent=2, sort_keys=True))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
