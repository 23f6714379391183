import json
import logging
import signal
import sys
import traceback

from azdocker.cloud.azure.api import AzureApi
from azdocker.config import Configs
from azdocker.deployment.deploy import Deployer, delete_group
from azdocker.prompts import ConsolePrompter
from azdocker.utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    try:
        configs = Configs.parse(argv)
    except ValueError as e:
        setup_logging()
        logger.error(f"Invalid configuration: {e}")
        return 1
    setup_logging(verbose=configs.show_logs)
    logger.debug(f"Configuration:\n{json.dumps(configs.to_dict(), indent=2)}")

    cloud_api = AzureApi(show_logs=configs.show_logs)
    prompter = ConsolePrompter()

    try:
        cloud_api.check_dependencies()
        if configs.mode.delete_group:
            account = cloud_api.ensure_logged_in(configs.mode.subscription)
            deleted = delete_group(
                cloud_api,
                configs.mode.delete_group,
                prompter,
                subscription=account.get("name") or configs.mode.subscription,
            )
            return 0 if deleted else 1
    except Exception as e:
        logger.error(f"Failed: {str(e)}")
        return 1

    assert configs.deploy  # should never happen

    deployer = Deployer(
        configs=configs.deploy,
        cloud_api=cloud_api,
        prompter=prompter,
    )

    def deploy_signal_handler(signum, frame):
        """Handle cleanup on signals"""
        logger.info("Received signal to terminate")
        deployer.cleanup()
        sys.exit(1)

    # Setup signal handlers for cleanup
    signal.signal(signal.SIGINT, deploy_signal_handler)
    signal.signal(signal.SIGTERM, deploy_signal_handler)

    try:
        deploy_output = deployer.deploy()
        if deploy_output is None:
            return 0
        if deploy_output.succeeded:
            logger.info(deploy_output.report())
            return 0
        logger.error(deploy_output.report())
        return 1
    except ValueError as e:
        logger.error(f"Failed: {str(e)}")
        return 1
    except Exception as e:
        logger.error(f"Failed: {str(e)}\n{traceback.format_exc()}")
        return 1
    finally:
        deployer.cleanup()


if __name__ == "__main__":
    exit(main())
