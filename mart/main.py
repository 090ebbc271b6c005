import logging

import uvicorn
from mart.api.api_run import app
from mart.utilities import config
from mart.utilities.network import server_urls


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.DEBUG if config.DEBUG else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    local_url, *lan_urls = server_urls(config.APP_PORT)
    print(f"Mart API on {local_url} (Press CTRL+C to quit)")
    for url in lan_urls:
        print(f"Reachable from phones on the same network at: {url}")
    uvicorn.run(app, host=config.APP_HOST, port=config.APP_PORT)
