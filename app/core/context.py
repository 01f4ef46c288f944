from contextvars import ContextVar

transaction_id_ctx: ContextVar[str] = ContextVar("transaction_id", default="")


def get_transaction_id() -> str:
    return transaction_id_ctx.get()
