import logging
import os
from fastapi import FastAPI
from Routes import items
from mangum import Mangum

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Items API")
app.include_router(items.router)
handler = Mangum(app)
