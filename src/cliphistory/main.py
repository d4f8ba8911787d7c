#!/usr/bin/env python3

import logging
import sys
from typing import List, Optional

import uvicorn
from dotenv import load_dotenv

from cliphistory.api import create_app
from cliphistory.clipboard import ClipboardSource, get_clipboard_source
from cliphistory.config import ServerConfig, parse_args
from cliphistory.services import HistoryCache, HistoryPoller

logger = logging.getLogger(__name__)


class ClipHistoryApp:

    def __init__(
        self,
        config: ServerConfig,
        source: Optional[ClipboardSource] = None,
    ):
        self.config = config
        self.source = source or get_clipboard_source(config.clipboard)
        self.cache = HistoryCache()
        self.poller = HistoryPoller(self.cache, self.source)
        self.api = create_app(self.cache, self.source)
        self.running = False

    def start(self):
        if self.running:
            return

        logger.info(
            f"Starting cliphistory - Clipboard: {self.source!r}, "
            f"Listen: {self.config.host}:{self.config.port}")
        self.running = True
        self.poller.start()

    def stop(self):
        if not self.running:
            return

        self.running = False
        self.poller.stop()
        logger.info("cliphistory stopped")

    def run_forever(self):
        self.start()

        try:
            uvicorn.run(
                self.api,
                host=self.config.host,
                port=self.config.port,
                log_level=self.config.log_level.lower(),
            )
        finally:
            self.stop()


def main(argv: Optional[List[str]] = None):
    load_dotenv()
    args = parse_args(argv)
    config = ServerConfig.from_args(args)

    logging.basicConfig(
        level=config.log_level,
        format='%(levelname)s: %(name)s: %(message)s')

    try:
        app = ClipHistoryApp(config)
    except NotImplementedError as e:
        logger.error(f"Unable to open clipboard: {e}")
        sys.exit(1)

    app.run_forever()


if __name__ == "__main__":
    main()
