from typing import Any, Awaitable, Callable, List, Protocol, runtime_checkable


@runtime_checkable
class Session(Protocol):
    """與聊天平台溝通所需的能力"""

    def add_handler(self, handler: Callable[..., Awaitable[None]]) -> Callable[[], None]:
        """註冊事件處理器，返回移除該處理器的函數"""
        ...

    async def send_message(self, channel_id: int, content: str) -> Any:
        """發送文字訊息到頻道"""
        ...

    async def open(self) -> None:
        """建立連線"""
        ...

    async def close(self) -> None:
        """關閉連線"""
        ...


@runtime_checkable
class SlateCommand(Protocol):
    """可註冊到機器人的指令

    name 用於路由輸入，synopsis 為簡短說明，usage 為完整用法。
    """
    name: str
    synopsis: str
    usage: str

    async def execute(self, ctx: Any, args: List[str], session: Session, message: Any) -> None:
        """執行指令，輸出經由 session 發送"""
        ...
