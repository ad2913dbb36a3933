"""
Tests for result delivery and the background I/O worker.

Covers:
- Result value/error semantics
- deliver() dispatching exactly one Result
- Loop and inline dispatchers
- IOWorker lifecycle
- SightGuideService.submit() callback bridge
"""

import asyncio
import threading
from unittest.mock import MagicMock

import pytest

from core.dispatch import InlineDispatcher, LoopDispatcher, Result, deliver
from core.errors import ParsingFailedError, RequestFailedError
from core.worker import IOWorker
from interfaces.recording_provider import IRecordingProvider
from interfaces.request_gateway import IRequestGateway
from models.schemas import Scene
from services.sightguide import SightGuideService


@pytest.fixture
def worker():
    w = IOWorker(name="sightguide-io-test")
    yield w
    w.stop()


def make_service(gateway, worker, dispatcher=None) -> SightGuideService:
    return SightGuideService(
        gateway=gateway,
        recording_provider=MagicMock(spec=IRecordingProvider),
        dispatcher=dispatcher,
        worker=worker,
    )


class StubGateway(IRequestGateway):
    """Answers typed requests with a fixed value or error."""

    def __init__(self, value=None, error=None):
        self.value = value
        self.error = error
        self.threads = []
        self.closed = False

    async def request(self, path, method, response_type, query_params=None, body_params=None):
        self.threads.append(threading.current_thread().name)
        if self.error is not None:
            raise self.error
        return self.value

    async def request_image(self, path, query_params=None):
        return None

    async def request_audio_and_play(self, path, query_params=None):
        return None

    async def upload_audio_file(self, path, file_path):
        return None

    async def aclose(self):
        self.closed = True


class TestResult:
    def test_success(self):
        result = Result.success(42)

        assert result.ok
        assert result.unwrap() == 42

    def test_success_without_value(self):
        result = Result.success()

        assert result.ok
        assert result.unwrap() is None

    def test_failure_reraises(self):
        error = RequestFailedError("boom", path="/glance/data")
        result = Result.failure(error)

        assert not result.ok
        with pytest.raises(RequestFailedError) as exc_info:
            result.unwrap()
        assert exc_info.value is error


class TestDeliver:
    @pytest.mark.asyncio
    async def test_delivers_value_once(self):
        callback = MagicMock()

        async def operation():
            return "scene"

        result = await deliver(operation(), callback, InlineDispatcher())

        callback.assert_called_once_with(result)
        assert result.unwrap() == "scene"

    @pytest.mark.asyncio
    async def test_delivers_error_once(self):
        callback = MagicMock()
        error = ParsingFailedError("bad json", path="/memory/labels")

        async def operation():
            raise error

        result = await deliver(operation(), callback, InlineDispatcher())

        callback.assert_called_once_with(result)
        assert result.error is error

    @pytest.mark.asyncio
    async def test_loop_dispatcher_posts_to_loop(self):
        loop = asyncio.get_running_loop()
        received = loop.create_future()

        async def operation():
            return 1

        await deliver(operation(), received.set_result, LoopDispatcher(loop))

        # Posted with call_soon_threadsafe, not called synchronously
        assert not received.done()
        result = await asyncio.wait_for(received, timeout=1)
        assert result.value == 1

    @pytest.mark.asyncio
    async def test_cancelled_operation_is_delivered_then_reraised(self):
        callback = MagicMock()
        started = asyncio.Event()

        async def operation():
            started.set()
            await asyncio.sleep(60)

        task = asyncio.ensure_future(deliver(operation(), callback, InlineDispatcher()))
        await started.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task

        callback.assert_called_once()
        (result,) = callback.call_args.args
        assert not result.ok
        assert isinstance(result.error, asyncio.CancelledError)


class TestIOWorker:
    def test_start_and_stop(self, worker):
        assert not worker.is_running()

        worker.start()
        assert worker.is_running()
        assert worker.loop is not None

        worker.stop()
        assert not worker.is_running()
        assert worker.loop is None

    def test_submit_starts_worker_and_runs_on_its_thread(self, worker):
        async def thread_name():
            return threading.current_thread().name

        future = worker.submit(thread_name())

        assert future.result(timeout=5) == "sightguide-io-test"
        assert worker.is_running()

    def test_stop_is_noop_when_not_running(self, worker):
        worker.stop()
        assert not worker.is_running()


class TestSubmit:
    @pytest.mark.asyncio
    async def test_submit_delivers_on_calling_loop(self, worker):
        loop = asyncio.get_running_loop()
        delivered = loop.create_future()
        gateway = StubGateway(value=Scene(scene_id="s1"))
        service = make_service(gateway, worker)

        def on_result(result):
            delivered.set_result((threading.current_thread(), result))

        service.submit(service.get_scene(), on_result)
        thread, result = await asyncio.wait_for(delivered, timeout=5)

        assert thread is threading.current_thread()
        assert result.unwrap().scene_id == "s1"
        assert gateway.threads == ["sightguide-io-test"]

    @pytest.mark.asyncio
    async def test_submit_delivers_failure(self, worker):
        loop = asyncio.get_running_loop()
        delivered = loop.create_future()
        service = make_service(StubGateway(error=RequestFailedError("down")), worker)

        service.submit(service.get_scene(), delivered.set_result)
        result = await asyncio.wait_for(delivered, timeout=5)

        assert not result.ok
        assert isinstance(result.error, RequestFailedError)

    def test_submit_with_explicit_dispatcher(self, worker):
        dispatcher = InlineDispatcher()
        callback = MagicMock()
        service = make_service(StubGateway(value=Scene(scene_id="s2")), worker, dispatcher)

        result = service.submit(service.get_scene(), callback).result(timeout=5)

        callback.assert_called_once_with(result)
        assert result.value.scene_id == "s2"

    def test_submit_without_callback_returns_future(self, worker):
        service = make_service(StubGateway(error=RequestFailedError("down")), worker)

        future = service.submit(service.get_scene())

        with pytest.raises(RequestFailedError):
            future.result(timeout=5)

    def test_shutdown_closes_gateway_and_stops_worker(self, worker):
        gateway = StubGateway(value=Scene(scene_id="s1"))
        service = make_service(gateway, worker)
        service.submit(service.get_scene()).result(timeout=5)

        service.shutdown()

        assert gateway.closed is True
        assert not worker.is_running()

    def test_stop_delivers_in_flight_operation_as_failure(self, worker):
        started = threading.Event()
        callback = MagicMock()

        class SlowGateway(StubGateway):
            async def request(self, *args, **kwargs):
                started.set()
                await asyncio.sleep(60)

        service = make_service(SlowGateway(), worker, InlineDispatcher())
        service.submit(service.get_scene(), callback)
        assert started.wait(timeout=5)

        worker.stop()

        callback.assert_called_once()
        (result,) = callback.call_args.args
        assert isinstance(result.error, asyncio.CancelledError)
