import asyncio
import random
import unittest

from hexbot.runtime.messaging import MessageBus, MessageTopic
from hexbot.runtime.motion_controller.startup_ramp import StartupRamp


def drain_filters(message_bus):
    filters = []
    while not message_bus.empty(MessageTopic.SETTLE_FILTER):
        filters.append(message_bus.get_nowait(MessageTopic.SETTLE_FILTER).settle_filter)
    return filters


class TestStartupRamp(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.message_bus = MessageBus()

    def _ramp(self, seed=7):
        return StartupRamp(range(12), self.message_bus, settle_interval=0, group_pause=0, rng=random.Random(seed))

    async def test_activates_every_servo_then_lifts_filter(self):
        ramp = self._ramp()
        await ramp.run()

        filters = drain_filters(self.message_bus)
        self.assertEqual(len(filters), 13)
        self.assertIsNone(filters[-1])
        self.assertEqual(filters[-2], frozenset(range(12)))
        self.assertEqual(sorted(ramp.activation_order), list(range(12)))

    async def test_shoulders_before_elbows(self):
        ramp = self._ramp()
        await ramp.run()

        order = ramp.activation_order
        self.assertTrue(all(index % 2 == 0 for index in order[:6]))
        self.assertTrue(all(index % 2 == 1 for index in order[6:]))

    async def test_filter_only_grows(self):
        await self._ramp().run()

        filters = drain_filters(self.message_bus)[:-1]
        for previous, current in zip(filters, filters[1:]):
            self.assertTrue(previous < current)
            self.assertEqual(len(current - previous), 1)

    async def test_order_depends_on_random_source(self):
        first = self._ramp(seed=1)
        await first.run()
        second = self._ramp(seed=1)
        await second.run()
        self.assertEqual(first.activation_order, second.activation_order)

    async def test_cancel_stops_publishing(self):
        ramp = StartupRamp(range(12), self.message_bus, settle_interval=0.01, group_pause=0.01, rng=random.Random(3))
        task = asyncio.create_task(ramp.run())
        await asyncio.sleep(0.025)
        ramp.cancel()
        await asyncio.wait_for(task, 1.0)

        filters = drain_filters(self.message_bus)
        self.assertTrue(ramp.cancelled)
        self.assertLess(len(ramp.activation_order), 12)
        self.assertNotIn(None, filters)


if __name__ == "__main__":
    unittest.main()
