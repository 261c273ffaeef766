import logging
from datetime import datetime

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

logger = logging.getLogger(__name__)

router = APIRouter(prefix='/api/ws', tags=['websockets'])


class ConnectionManager:
    """
    Tracks websocket clients and broadcasts "rates updated" events to them.
    """
    def __init__(self):
        self.active_connections: set[WebSocket] = set()

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.active_connections.add(websocket)
        logger.info(f"New WebSocket connection. Total connections: {len(self.active_connections)}")

    def disconnect(self, websocket: WebSocket) -> None:
        if websocket in self.active_connections:
            self.active_connections.discard(websocket)
            logger.info(f"WebSocket disconnected. Remaining connections: {len(self.active_connections)}")

    async def broadcast(self, message: dict) -> int:
        sent_count = 0
        failed_connections = []

        for websocket in list(self.active_connections):
            try:
                await websocket.send_json(message)
                sent_count += 1
            except Exception as e:
                logger.warning(f"Failed to send to websocket client: {e}")
                failed_connections.append(websocket)

        for websocket in failed_connections:
            self.disconnect(websocket)

        return sent_count

    async def rates_updated(self) -> None:
        sent = await self.broadcast({
            "event": "rates_updated",
            "timestamp": datetime.now().isoformat(),
        })
        logger.debug(f"Broadcast rates_updated to {sent} clients")


manager = ConnectionManager()


@router.websocket("/rates")
async def rates_updates(websocket: WebSocket):
    """Push a message every time a refresh installs new rates."""
    await manager.connect(websocket)
    try:
        while True:
            # Client messages are ignored; receiving keeps the disconnect observable
            await websocket.receive_text()
    except WebSocketDisconnect:
        manager.disconnect(websocket)
