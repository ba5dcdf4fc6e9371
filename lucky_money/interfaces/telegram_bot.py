from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, List, Sequence

from telegram import Update
from telegram.error import TelegramError
from telegram.ext import Application, CommandHandler, ContextTypes

from lucky_money.config.models import PresentationConfig
from lucky_money.core.time_utils import to_local
from lucky_money.history.models import SpinHistoryEntry
from lucky_money.rigging.models import RANDOM, ForceValue, TrollFakeThenReal, describe_rigging
from lucky_money.runtime.state import GameState
from lucky_money.runtime.store import GameStateStore
from lucky_money.spin.models import SpinOutcome

LOGGER = logging.getLogger(__name__)

BIG_WIN_THRESHOLD = 200_000
SMALL_WIN_VALUE = 10_000
UNKNOWN_COMMAND_TEXT = "Unknown command. Try /spin <your name>."

Handler = Callable[[Update, ContextTypes.DEFAULT_TYPE], Awaitable[None]]


def format_money(value: int) -> str:
    """Vietnamese grouping: ``20000`` -> ``20.000đ``."""

    return f"{value:,}".replace(",", ".") + "đ"


def render_phases(outcome: SpinOutcome) -> List[str]:
    """Messages shown one after another once the reels stop."""

    if outcome.is_empty:
        return ["💔 Out of money! The machine is empty, see you next Tết."]
    if outcome.is_troll:
        return [
            f"🎉 JACKPOT {format_money(outcome.displayed)}!!!",
            (
                f"⚠️ Urgent update: the wallet checked its balance. {format_money(outcome.displayed)} "
                f"has been gently adjusted to {format_money(outcome.real)}."
            ),
            f"Official result: {format_money(outcome.real)}. No refunds.",
        ]
    if outcome.real >= BIG_WIN_THRESHOLD:
        return [f"🎊 BIG WIN {format_money(outcome.real)}!!!"]
    if outcome.real == SMALL_WIN_VALUE:
        return [f"{format_money(outcome.real)}. Small, but full of love."]
    return [f"🎁 {format_money(outcome.real)}. Lucky all year!"]


class TelegramBotInterface:
    """Telegram layer that plays the slot machine and the admin panel.

    The bot is intentionally thin: every command maps to one
    :class:`GameStateStore` operation and renders what it returns. Updates are
    processed concurrently, so a second ``/spin`` arriving while a reveal is
    still playing is turned away instead of queued.

    The admin session is the store's single flag, not a per-chat login: once
    the PIN is accepted, admin commands work from every chat until ``/logout``.
    """

    def __init__(
        self,
        *,
        token: str,
        store: GameStateStore,
        presentation: PresentationConfig | None = None,
        admin_command: str = "admin_duy_only",
        timezone_name: str | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._application = Application.builder().token(token).concurrent_updates(True).build()
        self._store = store
        self._presentation = presentation or PresentationConfig()
        self._admin_command = admin_command
        self._tz_name = timezone_name
        self._logger = logger or LOGGER
        self._spinning = False
        self._register_handlers()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def run(self) -> None:
        """Poll Telegram until interrupted."""

        self._logger.info("Telegram bot polling started")
        self._application.run_polling(drop_pending_updates=True)
        self._logger.info("Telegram bot polling stopped")

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------
    def _register_handlers(self) -> None:
        public = {
            "start": self._cmd_start,
            "spin": self._cmd_spin,
            self._admin_command: self._cmd_login,
        }
        admin = {
            "logout": self._cmd_logout,
            "stock": self._cmd_stock,
            "adjust": self._cmd_adjust,
            "reset": self._cmd_reset,
            "honest": self._cmd_honest,
            "force": self._cmd_force,
            "troll": self._cmd_troll,
            "history": self._cmd_history,
        }
        for name, handler in public.items():
            self._application.add_handler(CommandHandler(name, self._wrap(handler)))
        for name, handler in admin.items():
            self._application.add_handler(CommandHandler(name, self._wrap(handler, admin=True)))

    def _wrap(self, handler: Handler, *, admin: bool = False) -> Handler:
        async def wrapped(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
            if admin and not self._store.is_admin_authenticated:
                await self._reply(update, UNKNOWN_COMMAND_TEXT)
                return
            try:
                await handler(update, context)
            except Exception as exc:  # pragma: no cover
                self._logger.exception("Telegram handler failed", exc_info=exc)
                await self._reply(update, "Command failed, check logs")

        return wrapped

    async def _cmd_start(self, update: Update, _: ContextTypes.DEFAULT_TYPE) -> None:
        await self._reply(update, "🧧 Lucky money time! Send /spin <your name> to try your luck.")

    async def _cmd_spin(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        name = " ".join(context.args or []).strip()
        if not name:
            await self._reply(update, "Enter your name first: /spin <your name>")
            return
        if self._spinning:
            await self._reply(update, "⏳ A spin is already running, wait for the result.")
            return
        self._spinning = True
        try:
            outcome = self._store.spin(name)
            await self._reply(update, f"🎰 Spinning for {name}...")
            await asyncio.sleep(self._presentation.spin_delay_sec)
            phases = render_phases(outcome)
            for index, text in enumerate(phases):
                if index:
                    await asyncio.sleep(self._presentation.reveal_delay_sec)
                await self._reply(update, text)
        finally:
            self._spinning = False

    async def _cmd_login(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        pin = context.args[0] if context.args else ""
        if self._store.login(pin):
            await self._reply(update, "🔓 Admin mode on. Commands: /stock /adjust /reset /honest /force /troll /history /logout")
        else:
            await self._reply(update, "Wrong PIN, boss!")

    async def _cmd_logout(self, update: Update, _: ContextTypes.DEFAULT_TYPE) -> None:
        self._store.logout()
        await self._reply(update, "🔒 Admin mode off.")

    async def _cmd_stock(self, update: Update, _: ContextTypes.DEFAULT_TYPE) -> None:
        await self._reply(update, self._format_stock(self._store.snapshot()))

    async def _cmd_adjust(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        numbers = _parse_ints(context.args, 2)
        if numbers is None:
            await self._reply(update, "Usage: /adjust <value> <delta>")
            return
        value, delta = numbers
        if not self._in_catalog(value):
            await self._reply(update, f"Unknown denomination {format_money(value)}")
            return
        self._store.adjust_quantity(value, delta)
        await self._reply(update, self._format_stock(self._store.snapshot()))

    async def _cmd_reset(self, update: Update, _: ContextTypes.DEFAULT_TYPE) -> None:
        self._store.reset_inventory()
        await self._reply(update, "♻️ Inventory restored.\n" + self._format_stock(self._store.snapshot()))

    async def _cmd_honest(self, update: Update, _: ContextTypes.DEFAULT_TYPE) -> None:
        self._store.set_rigging(RANDOM)
        await self._reply(update, "😇 Honest mode enabled. (Boring...)")

    async def _cmd_force(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        numbers = _parse_ints(context.args, 1)
        if numbers is None or numbers[0] <= 0:
            await self._reply(update, "Usage: /force <value>")
            return
        (target,) = numbers
        if not self._in_catalog(target):
            await self._reply(update, f"Unknown denomination {format_money(target)}")
            return
        self._store.set_rigging(ForceValue(target=target))
        await self._reply(update, f"🎯 The next player WILL get {format_money(target)}.")

    async def _cmd_troll(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        numbers = _parse_ints(context.args, 2)
        if numbers is None or min(numbers) <= 0:
            await self._reply(update, "Usage: /troll <shown value> <real value>")
            return
        fake, real = numbers
        if not self._in_catalog(real):
            await self._reply(update, f"Unknown denomination {format_money(real)}")
            return
        self._store.set_rigging(TrollFakeThenReal(displayed=fake, real=real))
        await self._reply(update, f"😈 Troll mode: show {format_money(fake)} then pay {format_money(real)}.")

    async def _cmd_history(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        limit = self._presentation.history_page_size
        numbers = _parse_ints(context.args, 1) if context.args else None
        if numbers is not None and numbers[0] > 0:
            limit = numbers[0]
        entries = self._store.snapshot().history.latest(limit)
        if not entries:
            await self._reply(update, "No spins yet.")
            return
        await self._reply(update, "\n".join(self._format_entry(entry) for entry in entries))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    async def _reply(self, update: Update, text: str) -> None:
        if not update.effective_chat:
            return
        try:
            await update.effective_chat.send_message(text)
        except TelegramError as exc:  # pragma: no cover - depends on Telegram availability
            self._logger.warning("Failed to reply in chat", exc_info=exc)

    def _in_catalog(self, value: int) -> bool:
        return self._store.snapshot().inventory.contains(value)

    def _format_stock(self, state: GameState) -> str:
        lines = [
            f"{format_money(d.value)}: {d.quantity}/{d.initial_quantity}" for d in state.inventory
        ]
        lines.append(f"Total in machine: {format_money(state.inventory.total_value())}")
        lines.append(f"Next spin: {describe_rigging(state.rigging)}")
        return "\n".join(lines)

    def _format_entry(self, entry: SpinHistoryEntry) -> str:
        when = to_local(entry.timestamp, self._tz_name).strftime("%d/%m %H:%M")
        text = f"{when} {entry.display_name}: {format_money(entry.real_value)}"
        if entry.displayed_value != entry.real_value:
            text += f" (shown {format_money(entry.displayed_value)})"
        return f"{text} [{entry.scenario.value}]"


def _parse_ints(args: Sequence[str] | None, count: int) -> list[int] | None:
    if not args or len(args) < count:
        return None
    try:
        return [int(arg) for arg in args[:count]]
    except ValueError:
        return None


__all__ = ["TelegramBotInterface", "format_money", "render_phases"]
