from __future__ import annotations

import logging
from typing import Optional

from hwid.services.identify.config import IdentifyConfig
from hwid.services.identify.engine import identify
from hwid.services.identify.logger import setup_logging
from hwid.services.probe.base import SystemProbe


logger = logging.getLogger("hwid.identify")


def main(probe: Optional[SystemProbe] = None) -> None:
    cfg = IdentifyConfig()
    setup_logging(cfg.log_config_path, cfg.log_level)
    tags = ",".join(t.value for t in cfg.categories)
    logger.info("Computing hardware identifier (categories=%s)", tags)
    print(identify(cfg, probe))


if __name__ == "__main__":
    main()
