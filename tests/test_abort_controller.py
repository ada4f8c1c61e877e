import asyncio
import signal
import unittest

from hexbot.runtime.abort_controller import AbortController


class TestAbortController(unittest.IsolatedAsyncioTestCase):
    async def test_first_signal_triggers_single_shutdown(self):
        calls = []

        async def shutdown():
            calls.append('shutdown')
            await asyncio.sleep(0)

        controller = AbortController(shutdown)
        controller.install()
        try:
            controller.exit_gracefully(signal.SIGTERM)
            controller.exit_gracefully(signal.SIGINT)
            await controller.wait()
        finally:
            controller.uninstall()

        self.assertTrue(controller.triggered)
        self.assertEqual(calls, ['shutdown'])

    async def test_not_triggered_without_signal(self):
        async def shutdown():
            raise AssertionError('unexpected shutdown')

        controller = AbortController(shutdown)
        self.assertFalse(controller.triggered)
        await controller.wait()


if __name__ == "__main__":
    unittest.main()
