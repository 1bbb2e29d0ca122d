import unittest

from gather_nade_commands import ArtifactHeader, ArtifactRenderer, NadeResult, NadeSummary


class TestArtifactRenderer(unittest.TestCase):
    """
    Tests the .cfg document layout.
    """

    def setUp(self) -> None:
        self.header = ArtifactHeader(source_label='https://csnades.gg/mirage', total=3)
        self.window = NadeSummary(
            id='nade_1', slug='window', nade_type='smoke', team='t', title_from='T  Spawn\n', title_to=' Window'
        )
        self.palace = NadeSummary(id='nade_2', slug='under-palace', nade_type='molotov', team='ct')
        self.ramp = NadeSummary(id='nade_3', slug='a-site-pop', nade_type='flashbang', title_from='Ramp')

    def test_full_document(self) -> None:
        results: list[NadeResult] = [
            NadeResult(
                nade=self.window,
                console_text='setpos 1 2 3;setang 4 5 6\\nsay_team hi',
                source_url='https://csnades.gg/mirage/smokes/window',
            ),
            NadeResult(nade=self.palace, error='HTTP 404 Not Found for https://csnades.gg/mirage/molotovs/under-palace'),
            NadeResult(
                nade=self.ramp,
                console_text='  bind x "+jump"  \n',
                source_url='https://csnades.gg/mirage/flashbangs/a-site-pop',
            ),
        ]
        renderer = ArtifactRenderer()
        computed: str = renderer.render(results, self.header)
        expected: str = '\n'.join(
            [
                '// Generated from https://csnades.gg/mirage',
                '// Total nades: 3',
                '',
                '// SMOKE | T | T Spawn -> Window',
                '// https://csnades.gg/mirage/smokes/window',
                'setpos 1 2 3;setang 4 5 6',
                '',
                '// MOLOTOV | CT | under-palace',
                '// MISSING_CONSOLE',
                '',
                '// FLASHBANG | ANY | a-site-pop',
                '// https://csnades.gg/mirage/flashbangs/a-site-pop',
                'bind x "+jump"',
                '',
            ]
        )
        self.assertEqual(computed, expected)
        self.assertEqual(renderer.missing_count, 1)
        self.assertEqual(ArtifactRenderer.count_missing(results), 1)

    def test_render_is_deterministic(self) -> None:
        results: list[NadeResult] = [NadeResult(nade=self.palace), NadeResult(nade=self.window, console_text='x')]
        first: str = ArtifactRenderer().render(results, self.header)
        second: str = ArtifactRenderer().render(results, self.header)
        self.assertEqual(first, second)

    def test_command_narrowing(self) -> None:
        cases: list[tuple[str, str]] = [
            ('setpos 1 2 3;setang 4 5 6', 'setpos 1 2 3;setang 4 5 6'),
            ('echo hi;SETPOS 1 2 3;SETANG 4 5 6\nsetpos 7 8 9;setang 1 1 1', 'SETPOS 1 2 3;SETANG 4 5 6'),
            ('setpos 1 2 3; setang 4 5 6', 'setpos 1 2 3; setang 4 5 6'),
            ('  setpos 1 2 3\n', 'setpos 1 2 3'),
        ]
        for console_text, expected in cases:
            with self.subTest(console_text=console_text):
                self.assertEqual(ArtifactRenderer.command_line_for(console_text), expected)

    def test_label_needs_both_titles(self) -> None:
        self.assertEqual(ArtifactRenderer.label_for(self.ramp), 'FLASHBANG | ANY | a-site-pop')
        self.assertEqual(ArtifactRenderer.label_for(self.window), 'SMOKE | T | T Spawn -> Window')

    def test_empty_results(self) -> None:
        computed: str = ArtifactRenderer().render([], ArtifactHeader(source_label='https://csnades.gg/nuke', total=0))
        self.assertEqual(computed, '// Generated from https://csnades.gg/nuke\n// Total nades: 0\n')


if __name__ == '__main__':
    unittest.main()
