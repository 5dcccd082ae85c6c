from __future__ import annotations

import logging
import os

from srm.application.container import build_container
from srm.config import get_app_paths, get_demo_seed
from srm.logging_config import setup_logging
from srm.ui.app import App

log = logging.getLogger(__name__)


def main() -> None:
    paths = get_app_paths()
    setup_logging(paths.logs_dir, level=logging.INFO, console=bool(os.environ.get("SRM_DEBUG")))

    container = build_container(seed_demo=True, seed=get_demo_seed())
    log.info(
        "app_started products=%s sales=%s",
        len(container.ledger.list_products()), len(container.ledger.list_sales()),
    )

    app = App(
        ledger=container.ledger,
        reports=container.reports,
        logs_dir=str(paths.logs_dir),
        exports_dir=str(paths.exports_dir),
    )
    app.mainloop()


if __name__ == "__main__":
    main()
