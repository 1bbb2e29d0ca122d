import asyncio
import random
import unittest

from gather_nade_commands import BoundedScheduler, run_bounded


class TestBoundedScheduler(unittest.IsolatedAsyncioTestCase):
    """
    Tests ordering, the concurrency ceiling, and failure isolation.
    """

    def make_jobs(self, count: int, limit_tracker: dict[str, int], seed: int = 7) -> list:
        rng = random.Random(seed)
        delays: list[float] = [rng.uniform(0, 0.01) for _ in range(count)]

        def job_for(i: int):
            async def job() -> int:
                limit_tracker['active'] += 1
                limit_tracker['peak'] = max(limit_tracker['peak'], limit_tracker['active'])
                try:
                    await asyncio.sleep(delays[i])
                    return i
                finally:
                    limit_tracker['active'] -= 1

            return job

        return [job_for(i) for i in range(count)]

    async def test_results_follow_submission_order(self) -> None:
        for count in (0, 1, 2, 17, 40):
            with self.subTest(count=count):
                tracker: dict[str, int] = {'active': 0, 'peak': 0}
                computed: list = await run_bounded(self.make_jobs(count, tracker, seed=count), 4)
                self.assertEqual(computed, list(range(count)))

    async def test_never_exceeds_limit(self) -> None:
        for limit in (1, 3, 6, 50):
            with self.subTest(limit=limit):
                tracker: dict[str, int] = {'active': 0, 'peak': 0}
                scheduler = BoundedScheduler(limit)
                await scheduler.run(self.make_jobs(25, tracker, seed=limit))
                self.assertLessEqual(tracker['peak'], limit)
                self.assertLessEqual(scheduler.peak_active, limit)
                self.assertEqual(scheduler.peak_active, min(limit, 25))
                self.assertEqual(scheduler.active, 0)

    async def test_admission_is_continuous(self) -> None:
        """
        Checks a slow job doesn't hold back the queue; fast jobs keep flowing past it.
        """
        finished: list[str] = []
        release_slow = asyncio.Event()

        async def slow() -> str:
            await release_slow.wait()
            finished.append('slow')
            return 'slow'

        def fast_for(name: str):
            async def fast() -> str:
                await asyncio.sleep(0)
                finished.append(name)
                if len(finished) == 3:
                    release_slow.set()
                return name

            return fast

        computed: list = await run_bounded([slow, fast_for('f1'), fast_for('f2'), fast_for('f3')], 2)
        self.assertEqual(computed, ['slow', 'f1', 'f2', 'f3'])
        self.assertEqual(finished, ['f1', 'f2', 'f3', 'slow'])

    async def test_failures_are_isolated(self) -> None:
        async def ok() -> str:
            await asyncio.sleep(0)
            return 'ok'

        async def boom() -> str:
            await asyncio.sleep(0)
            raise RuntimeError('boom')

        computed: list = await run_bounded([ok, boom, ok, boom, ok], 2)
        self.assertEqual(computed[0], 'ok')
        self.assertIsInstance(computed[1], RuntimeError)
        self.assertEqual(str(computed[1]), 'boom')
        self.assertEqual(computed[2], 'ok')
        self.assertIsInstance(computed[3], RuntimeError)
        self.assertEqual(computed[4], 'ok')

    async def test_limit_is_clamped(self) -> None:
        self.assertEqual(BoundedScheduler(0).limit, 1)
        self.assertEqual(BoundedScheduler(-5).limit, 1)
        tracker: dict[str, int] = {'active': 0, 'peak': 0}
        computed: list = await run_bounded(self.make_jobs(5, tracker), 0)
        self.assertEqual(computed, [0, 1, 2, 3, 4])
        self.assertEqual(tracker['peak'], 1)

    async def test_empty_jobs(self) -> None:
        self.assertEqual(await run_bounded([], 3), [])


if __name__ == '__main__':
    unittest.main()
