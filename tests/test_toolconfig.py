from solc_remap.config import Settings
from solc_remap.service.transform import LineTransform
from solc_remap.toolconfig import build_tool_config, config


def test_default_config():
    assert config.solidity == "0.8.9"
    assert config.paths.sources == "./src"
    assert config.paths.cache == "./cache_hardhat"


def test_config_follows_settings():
    tool_config = build_tool_config(Settings(SOLIDITY_VERSION="0.8.24", CACHE_DIR="./build/cache"))
    assert tool_config.solidity == "0.8.24"
    assert tool_config.paths.cache == "./build/cache"


def test_each_line_hook_uses_working_directory_remappings(tmp_path, monkeypatch):
    (tmp_path / "remappings.txt").write_text("@openzeppelin/=lib/openzeppelin-contracts/\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    transform = config.preprocess.each_line()

    assert isinstance(transform, LineTransform)
    assert (
        transform('import "@openzeppelin/token/ERC20.sol";')
        == 'import "lib/openzeppelin-contracts/token/ERC20.sol";'
    )
    assert transform("uint256 x = 1;") == "uint256 x = 1;"


def test_empty_remappings_pass_everything_through(tmp_path, monkeypatch):
    (tmp_path / "remappings.txt").write_text("", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    transform = config.preprocess.each_line()

    line = 'import "@openzeppelin/token/ERC20.sol";'
    assert transform(line) == line
