from unittest import IsolatedAsyncioTestCase

from ...resolver.did_resolver import DIDResolver
from ...resolver.tests.test_init import STATIC_RESOLVER, StaticResolver
from ..base import SettingsError
from ..default_context import DefaultContextBuilder
from ..injection_context import InjectionContext


class TestDefaultContext(IsolatedAsyncioTestCase):
    async def test_build_context(self):
        builder = DefaultContextBuilder(settings={"resolver.classes": STATIC_RESOLVER})
        result = await builder.build_context()

        assert isinstance(result, InjectionContext)
        resolver = result.inject(DIDResolver)
        assert resolver.timeout == DIDResolver.DEFAULT_TIMEOUT
        assert len(resolver.resolvers) == 1
        assert isinstance(resolver.resolvers[0], StaticResolver)

    async def test_build_context_timeout(self):
        builder = DefaultContextBuilder(settings={"resolver.timeout": "5"})
        result = await builder.build_context()
        assert result.inject(DIDResolver).timeout == 5

    async def test_build_context_x_bad_timeout(self):
        builder = DefaultContextBuilder(settings={"resolver.timeout": "never"})
        with self.assertRaises(SettingsError):
            await builder.build_context()

    def test_update_settings(self):
        builder = DefaultContextBuilder(settings={"resolver.timeout": 1})
        builder.update_settings({"resolver.timeout": 2})
        assert builder.settings["resolver.timeout"] == 2
