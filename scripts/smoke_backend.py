#!/usr/bin/env python3
"""
Smoke test against a live SightGuide backend.

Calls the read-only endpoints (scene, IMU, memory labels) and, optionally,
the fixation image for a scene. Nothing is created on the server.

Usage:
    python scripts/smoke_backend.py --base-url http://192.168.3.38:8080
    python scripts/smoke_backend.py --scene-id s1 --save-image fixation.png
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from core.config import get_settings
from core.errors import ApiError
from core.logger import configure_script_logging, format_exception_short, logger
from infrastructure.http.gateway import RequestGateway
from services.sightguide import SightGuideService


async def run_smoke(base_url: str, scene_id: str = "", save_image: str = "") -> int:
    """Run the checks and return the number of failures."""
    gateway = RequestGateway(base_url=base_url)
    service = SightGuideService(gateway=gateway)
    failures = 0

    checks = [
        ("scene", service.get_scene),
        ("imu", service.get_imu_data),
        ("memory labels", service.request_memory_labels),
    ]

    try:
        for name, operation in checks:
            try:
                result = await operation()
                logger.info(f"[OK] {name}: {result.model_dump_json()[:200]}")
            except ApiError as e:
                failures += 1
                logger.error(f"[FAIL] {name}: {e.kind.value} - {format_exception_short(e)}")

        if scene_id:
            image = await service.request_fixation_image(scene_id)
            if image is None:
                failures += 1
                logger.error(f"[FAIL] fixation image for scene {scene_id}")
            else:
                logger.info(f"[OK] fixation image: {image.format} {image.size}")
                if save_image:
                    image.save(save_image)
                    logger.info(f"Saved image to {save_image}")
    finally:
        await gateway.aclose()

    return failures


def main() -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Smoke test the SightGuide backend endpoints",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--base-url",
        default=settings.base_url,
        help=f"Backend base URL (default: {settings.base_url})",
    )
    parser.add_argument("--scene-id", default="", help="Also fetch the fixation image")
    parser.add_argument("--save-image", default="", help="Write the fixation image here")
    parser.add_argument("--log-level", default=settings.script_log_level)
    args = parser.parse_args()

    configure_script_logging(level=args.log_level)
    logger.info("=" * 60)
    logger.info(f"{settings.app_name} v{settings.app_version}: smoke testing {args.base_url}")
    logger.info("=" * 60)

    failures = asyncio.run(run_smoke(args.base_url, args.scene_id, args.save_image))
    if failures:
        logger.error(f"{failures} check(s) failed")
        return 1
    logger.info("All checks passed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
