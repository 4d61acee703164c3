"""Tests for clear command functionality."""

import asyncio
import unittest

from fakes import FakeConnector, FakeWebSocket, make_videos, snapshot_frame
from src.synctubequeue.auth import SessionCredential
from src.synctubequeue.commands.clear import ClearCommand
from src.synctubequeue.errors import ConnectTimeoutError, EmptyPlaylistError, WaitTimeoutError
from src.synctubequeue.protocol import MessageType


class TestClearCommand(unittest.IsolatedAsyncioTestCase):
    """Test cases for clear command functionality."""

    def setUp(self):
        """Set up test fixtures."""
        self.socket = FakeWebSocket()
        self.connector = FakeConnector(self.socket)

    async def authenticate(self):
        return SessionCredential("tok")

    def make_command(self, **kwargs):
        kwargs.setdefault("pacing_interval", 0.01)
        kwargs.setdefault("bot_name", "")
        return ClearCommand(
            "room", authenticate=self.authenticate, connector=self.connector, **kwargs
        )

    async def test_clear_removes_every_video(self):
        """Test one remove frame per snapshot entry."""
        self.socket.push(snapshot_frame(make_videos(4)))

        result = await self.make_command().run()

        self.assertTrue(result)
        removed = self.socket.sent_messages(MessageType.REMOVE_VIDEO)
        self.assertEqual(removed, [[31, {"id": f"id{i}"}] for i in range(1, 5)])
        self.assertTrue(self.socket.closed)

    async def test_clear_uses_latest_snapshot(self):
        """Test that a push arriving after open is waited for."""

        async def push_later():
            await asyncio.sleep(0.05)
            self.socket.push(snapshot_frame(make_videos(2)))

        task = asyncio.create_task(push_later())
        await self.make_command(snapshot_timeout_ms=2000).run()
        await task

        removed = self.socket.sent_messages(MessageType.REMOVE_VIDEO)
        self.assertEqual([m[1]["id"] for m in removed], ["id1", "id2"])

    async def test_clear_empty_playlist(self):
        """Test clearing an empty playlist."""
        self.socket.push(snapshot_frame([]))

        with self.assertRaises(EmptyPlaylistError):
            await self.make_command().run()

        self.assertEqual(self.socket.sent, [])
        self.assertTrue(self.socket.closed)

    async def test_clear_no_snapshot(self):
        """Test a room that never sends its playlist."""
        with self.assertRaises(WaitTimeoutError):
            await self.make_command(snapshot_timeout_ms=50).run()

        self.assertEqual(self.socket.sent, [])
        self.assertTrue(self.socket.closed)

    async def test_clear_connect_timeout(self):
        """Test that a socket that never opens sends nothing."""
        self.connector.delay = 10

        with self.assertRaises(ConnectTimeoutError):
            await self.make_command(open_timeout_ms=50).run()

        self.assertEqual(self.socket.sent, [])

    async def test_clear_dry_run(self):
        """Test that dry run sends nothing."""
        self.socket.push(snapshot_frame(make_videos(3)))

        self.assertTrue(await self.make_command(dry_run=True).run())
        self.assertEqual(self.socket.sent, [])


if __name__ == "__main__":
    unittest.main()
