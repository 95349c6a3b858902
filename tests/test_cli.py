"""
CLI Entry Point Tests
"""

from unittest.mock import patch

import pytest
from web3 import Web3

from blockchain.contract_factory import compute_create_address
from utils.cli import build_parser, main, main_with_mint, run
from tests.conftest import DEPLOYED_ADDRESS, MINTABLE_ABI, TEST_ADDRESS, TX_HASH


@pytest.fixture
def patched_signer(signer):
    with patch('utils.cli.load_signer', return_value=signer) as load:
        yield load


class TestParser:

    def test_defaults(self):
        options = build_parser().parse_args(['--artifact', 'Token.json'])

        assert options.artifact == 'Token.json'
        assert options.args == '[]'
        assert not options.simulate
        assert not options.verbose

    def test_simulate_flag(self):
        options = build_parser().parse_args(['--artifact', 'a.json', '--args', '[1]', '-S'])

        assert options.simulate
        assert options.args == '[1]'

    def test_artifact_required(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args([])

        assert exc_info.value.code == 1
        assert "--artifact" in capsys.readouterr().err

    @pytest.mark.parametrize("argv", [[], ["--artifact"], ["--artifact", "a.json", "--bogus"]])
    def test_usage_errors_exit_1(self, argv, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(argv)

        assert exc_info.value.code == 1
        assert "usage:" in capsys.readouterr().err


class TestDeployCommand:

    def test_simulated_deploy_prints_banner(self, patched_signer, w3, artifact_file, capsys):
        code = main(['--artifact', artifact_file(), '--args', '[]', '-S'])

        out = capsys.readouterr().out
        assert code == 0
        assert f"Deployed contract to: {compute_create_address(TEST_ADDRESS, 7)}" in out
        assert "Gas used:             100000" in out
        w3.eth.send_raw_transaction.assert_not_called()

    def test_real_deploy_prints_receipt_values(self, patched_signer, artifact_file, capsys):
        code = main(['--artifact', artifact_file(), '--args', '["Token", "TKN"]'])

        out = capsys.readouterr().out
        assert code == 0
        assert f"Deployed contract to: {DEPLOYED_ADDRESS}" in out
        assert "Gas used:             123456" in out

    def test_missing_artifact(self, patched_signer, tmp_path, capsys):
        code = main(['--artifact', str(tmp_path / 'missing.json')])

        captured = capsys.readouterr()
        assert code == 1
        assert captured.err.count("ArtifactNotFoundError") == 1
        assert "Deployed contract" not in captured.out

    def test_malformed_artifact(self, patched_signer, tmp_path, capsys):
        path = tmp_path / 'Token.json'
        path.write_text('{"abi": [')

        code = main(['--artifact', str(path)])

        assert code == 1
        assert "ArtifactParseError" in capsys.readouterr().err

    def test_missing_private_key(self, artifact_file, capsys):
        code = run(['--artifact', artifact_file(), '-S'], env={})

        assert code == 1
        assert "SignerConfigError" in capsys.readouterr().err

    def test_bad_args_expression(self, patched_signer, artifact_file, capsys):
        code = main(['--artifact', artifact_file(), '--args', "__import__('os')"])

        assert code == 1
        assert "ConstructorArgsError" in capsys.readouterr().err

    def test_deploy_failure(self, patched_signer, w3, artifact_file, capsys):
        w3.eth.send_raw_transaction.side_effect = ValueError("insufficient funds")

        code = main(['--artifact', artifact_file()])

        assert code == 1
        assert "insufficient funds" in capsys.readouterr().err


class TestDeployAndMintCommand:

    def test_deploy_then_mint(self, patched_signer, w3, artifact_file, capsys):
        code = main_with_mint(['--artifact', artifact_file(abi=MINTABLE_ABI)])

        out = capsys.readouterr().out
        assert code == 0
        assert f"Deployed contract to: {DEPLOYED_ADDRESS}" in out
        assert f"Mint result: {Web3.to_hex(TX_HASH)}" in out
        assert w3.eth.send_raw_transaction.call_count == 2

    def test_simulate_skips_mint(self, patched_signer, w3, artifact_file, capsys):
        code = main_with_mint(['--artifact', artifact_file(abi=MINTABLE_ABI), '-S'])

        out = capsys.readouterr().out
        assert code == 0
        assert "Deployed contract to:" in out
        assert "Mint result" not in out
        w3.eth.contract.return_value.functions.mint.assert_not_called()

    def test_mint_failure_after_deploy(self, patched_signer, artifact_file, capsys):
        code = main_with_mint(['--artifact', artifact_file()])

        captured = capsys.readouterr()
        assert code == 1
        assert f"Deployed contract to: {DEPLOYED_ADDRESS}" in captured.out
        assert "MintError" in captured.err


class TestInvalidArtifactContents:

    def test_bad_bytecode_reported_as_deployment_error(self, signer, artifact_file, capsys):
        real_signer = signer.__class__(
            private_key=signer.private_key,
            network=signer.network,
            w3=Web3(),
            account=signer.account
        )

        with patch('utils.cli.load_signer', return_value=real_signer):
            code = main(['--artifact', artifact_file(bytecode='0xzz'), '-S'])

        captured = capsys.readouterr()
        assert code == 1
        assert "DeploymentError" in captured.err
        assert "Deployed contract" not in captured.out
