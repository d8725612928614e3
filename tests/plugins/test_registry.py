import pytest

from msgkit.errors import PluginNotFoundError
from msgkit.plugins.registry import PluginHub, hub


@pytest.mark.parametrize(
    "name, module",
    [
        ("LocaleTextDomain", "locale_text_domain"),
        ("msg-init", "msg_init"),
        ("msg_scan", "msg_scan"),
    ],
)
def test_module_name(name, module):
    assert PluginHub._module_name(name) == module


def test_module_name_empty():
    with pytest.raises(ValueError):
        PluginHub._module_name("  ")


def test_commands_are_discovered():
    names = [cls.command_name for cls in hub.list_commands(load_all=True)]
    assert names == ["msg-init", "msg-scan"]


def test_build_command(dist):
    cmd = hub.build_command("msg-init", dist)

    assert type(cmd).command_name == "msg-init"
    assert cmd.dist is dist


def test_build_unknown_command(dist):
    with pytest.raises(ValueError):
        hub.build_command("msg-frobnicate", dist)


def test_build_provider(dist):
    plugin = hub.build_provider("LocaleTextDomain", dist)
    assert plugin.lang_file_suffix == "po"


def test_build_unknown_provider(dist):
    with pytest.raises(PluginNotFoundError) as exc:
        hub.build_provider("NoSuchPlugin", dist)

    assert exc.value.name == "NoSuchPlugin"


def test_register_command_decorator(dist):
    local = PluginHub()

    @local.register_command("msg-hello")
    class Hello:
        command_name = "msg-hello"

        def __init__(self, dist, **kwargs):
            self.dist = dist

    assert isinstance(local.build_command("MSG-HELLO", dist), Hello)
