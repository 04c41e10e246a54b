#!/usr/bin/env python
import uvicorn
from dotenv import load_dotenv

if __name__ == "__main__":
    # Load environment variables before the settings are read
    load_dotenv()

    from hello_addon.config import settings

    uvicorn.run(
        "hello_addon.main:app",
        host=settings.get_host(),
        port=settings.get_port(),
        reload=settings.reload_enabled(),
        log_level=settings.get_log_level(),
        access_log=True
    )
