"""Interface Segregation Principle (ISP).

Clients should not be forced to depend on methods they do not use. Many small
protocols replace one fat interface; a class satisfies only the ones it needs.
"""
from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from ..display import HEADING

logger = logging.getLogger(__name__)


# Violates ISP: every worker must implement every method.
class WorkerBad(ABC):
    @abstractmethod
    def work(self) -> None: ...

    @abstractmethod
    def eat(self) -> None: ...

    @abstractmethod
    def sleep(self) -> None: ...

    @abstractmethod
    def attend_meeting(self) -> None: ...

    @abstractmethod
    def code(self) -> None: ...

    @abstractmethod
    def design(self) -> None: ...

    @abstractmethod
    def manage(self) -> None: ...


class DeveloperBad(WorkerBad):
    def work(self) -> None:
        logger.info("Developer working on code")

    def eat(self) -> None:
        logger.info("Developer eating lunch")

    def sleep(self) -> None:
        logger.info("Developer sleeping")

    def attend_meeting(self) -> None:
        logger.info("Developer attending meeting")

    def code(self) -> None:
        logger.info("Developer coding")

    def design(self) -> None:
        raise NotImplementedError("This developer does not do design work")

    def manage(self) -> None:
        raise NotImplementedError("This developer does not manage people")


@runtime_checkable
class Worker(Protocol):
    def work(self) -> None: ...


@runtime_checkable
class Human(Protocol):
    def eat(self) -> None: ...

    def sleep(self) -> None: ...


@runtime_checkable
class MeetingAttendee(Protocol):
    def attend_meeting(self) -> None: ...


@runtime_checkable
class Programmer(Protocol):
    def code(self) -> None: ...

    def debug(self) -> None: ...

    def review_code(self) -> None: ...


@runtime_checkable
class Designer(Protocol):
    def design(self) -> None: ...

    def create_mockups(self) -> None: ...


@runtime_checkable
class Manager(Protocol):
    def manage(self) -> None: ...

    def conduct_reviews(self) -> None: ...

    def plan_projects(self) -> None: ...


@runtime_checkable
class Analyst(Protocol):
    def analyze_data(self) -> None: ...

    def create_reports(self) -> None: ...


class Developer:
    """Worker, Human, MeetingAttendee, Programmer."""

    def work(self) -> None:
        logger.info("Developer working on features")

    def eat(self) -> None:
        logger.info("Developer eating at desk")

    def sleep(self) -> None:
        logger.info("Developer sleeping (when not debugging)")

    def attend_meeting(self) -> None:
        logger.info("Developer attending standup")

    def code(self) -> None:
        logger.info("Developer writing Python")

    def debug(self) -> None:
        logger.info("Developer debugging application")

    def review_code(self) -> None:
        logger.info("Developer reviewing pull request")


class UXDesigner:
    """Worker, Human, MeetingAttendee, Designer."""

    def work(self) -> None:
        logger.info("UX Designer working on user experience")

    def eat(self) -> None:
        logger.info("UX Designer eating while sketching")

    def sleep(self) -> None:
        logger.info("UX Designer dreaming of better interfaces")

    def attend_meeting(self) -> None:
        logger.info("UX Designer presenting design concepts")

    def design(self) -> None:
        logger.info("UX Designer creating user flows")

    def create_mockups(self) -> None:
        logger.info("UX Designer creating high-fidelity mockups")


class ProjectManager:
    """Worker, Human, MeetingAttendee, Manager."""

    def work(self) -> None:
        logger.info("Project Manager coordinating team")

    def eat(self) -> None:
        logger.info("Project Manager eating during lunch meeting")

    def sleep(self) -> None:
        logger.info("Project Manager sleeping between sprints")

    def attend_meeting(self) -> None:
        logger.info("Project Manager running sprint planning")

    def manage(self) -> None:
        logger.info("Project Manager managing project timeline")

    def conduct_reviews(self) -> None:
        logger.info("Project Manager conducting team reviews")

    def plan_projects(self) -> None:
        logger.info("Project Manager planning next quarter")


class FullStackDeveloper:
    """Worker, Human, MeetingAttendee, Programmer, Designer."""

    def work(self) -> None:
        logger.info("Full-stack Developer working on full application")

    def eat(self) -> None:
        logger.info("Full-stack Developer eating while coding")

    def sleep(self) -> None:
        logger.info("Full-stack Developer power napping")

    def attend_meeting(self) -> None:
        logger.info("Full-stack Developer in architecture meeting")

    def code(self) -> None:
        logger.info("Full-stack Developer coding frontend and backend")

    def debug(self) -> None:
        logger.info("Full-stack Developer debugging across the stack")

    def review_code(self) -> None:
        logger.info("Full-stack Developer reviewing architecture")

    def design(self) -> None:
        logger.info("Full-stack Developer designing system architecture")

    def create_mockups(self) -> None:
        logger.info("Full-stack Developer creating technical mockups")


class DataAnalyst:
    """Worker, Human, MeetingAttendee, Analyst."""

    def work(self) -> None:
        logger.info("Data Analyst working with datasets")

    def eat(self) -> None:
        logger.info("Data Analyst eating while reviewing charts")

    def sleep(self) -> None:
        logger.info("Data Analyst sleeping after long analysis")

    def attend_meeting(self) -> None:
        logger.info("Data Analyst presenting insights")

    def analyze_data(self) -> None:
        logger.info("Data Analyst analyzing user behavior data")

    def create_reports(self) -> None:
        logger.info("Data Analyst creating quarterly reports")


# Violates ISP: audio-only players would have to stub out video, streaming
# and recording controls.
class MediaPlayerBad(ABC):
    @abstractmethod
    def play(self) -> None: ...

    @abstractmethod
    def pause(self) -> None: ...

    @abstractmethod
    def stop(self) -> None: ...

    @abstractmethod
    def next(self) -> None: ...

    @abstractmethod
    def previous(self) -> None: ...

    @abstractmethod
    def shuffle(self) -> None: ...

    @abstractmethod
    def repeat(self) -> None: ...

    @abstractmethod
    def adjust_volume(self, level: int) -> None: ...

    @abstractmethod
    def show_video_controls(self) -> None: ...

    @abstractmethod
    def adjust_brightness(self, level: int) -> None: ...

    @abstractmethod
    def change_subtitles(self, language: str) -> None: ...

    @abstractmethod
    def record(self) -> None: ...

    @abstractmethod
    def livestream(self) -> None: ...


@runtime_checkable
class BasicPlayer(Protocol):
    def play(self) -> None: ...

    def pause(self) -> None: ...

    def stop(self) -> None: ...


@runtime_checkable
class PlaylistPlayer(BasicPlayer, Protocol):
    def next(self) -> None: ...

    def previous(self) -> None: ...

    def shuffle(self) -> None: ...

    def repeat(self) -> None: ...


@runtime_checkable
class VolumeControl(Protocol):
    def adjust_volume(self, level: int) -> None: ...

    def mute(self) -> None: ...

    def unmute(self) -> None: ...


@runtime_checkable
class VideoPlayer(BasicPlayer, Protocol):
    def show_video_controls(self) -> None: ...

    def adjust_brightness(self, level: int) -> None: ...

    def change_subtitles(self, language: str) -> None: ...

    def toggle_fullscreen(self) -> None: ...


@runtime_checkable
class StreamingCapable(Protocol):
    def livestream(self) -> None: ...

    def stop_stream(self) -> None: ...


@runtime_checkable
class RecordingCapable(Protocol):
    def record(self) -> None: ...

    def stop_recording(self) -> None: ...


class SimpleAudioPlayer:
    """PlaylistPlayer with VolumeControl."""

    def play(self) -> None:
        logger.info("Playing audio")

    def pause(self) -> None:
        logger.info("Pausing audio")

    def stop(self) -> None:
        logger.info("Stopping audio")

    def next(self) -> None:
        logger.info("Next track")

    def previous(self) -> None:
        logger.info("Previous track")

    def shuffle(self) -> None:
        logger.info("Shuffling playlist")

    def repeat(self) -> None:
        logger.info("Repeating playlist")

    def adjust_volume(self, level: int) -> None:
        logger.info("Setting volume to %d", level)

    def mute(self) -> None:
        logger.info("Muting audio")

    def unmute(self) -> None:
        logger.info("Unmuting audio")


class VideoStreamingPlayer:
    """VideoPlayer, PlaylistPlayer, VolumeControl and StreamingCapable."""

    def play(self) -> None:
        logger.info("Playing video stream")

    def pause(self) -> None:
        logger.info("Pausing video stream")

    def stop(self) -> None:
        logger.info("Stopping video stream")

    def next(self) -> None:
        logger.info("Next video")

    def previous(self) -> None:
        logger.info("Previous video")

    def shuffle(self) -> None:
        logger.info("Shuffling video playlist")

    def repeat(self) -> None:
        logger.info("Repeating video playlist")

    def adjust_volume(self, level: int) -> None:
        logger.info("Setting video volume to %d", level)

    def mute(self) -> None:
        logger.info("Muting video")

    def unmute(self) -> None:
        logger.info("Unmuting video")

    def show_video_controls(self) -> None:
        logger.info("Showing video controls overlay")

    def adjust_brightness(self, level: int) -> None:
        logger.info("Setting brightness to %d", level)

    def change_subtitles(self, language: str) -> None:
        logger.info("Changing subtitles to %s", language)

    def toggle_fullscreen(self) -> None:
        logger.info("Toggling fullscreen mode")

    def livestream(self) -> None:
        logger.info("Starting livestream")

    def stop_stream(self) -> None:
        logger.info("Stopping livestream")


class PodcastPlayer:
    """BasicPlayer with VolumeControl; no playlist or video controls."""

    def play(self) -> None:
        logger.info("Playing podcast")

    def pause(self) -> None:
        logger.info("Pausing podcast")

    def stop(self) -> None:
        logger.info("Stopping podcast")

    def adjust_volume(self, level: int) -> None:
        logger.info("Setting podcast volume to %d", level)

    def mute(self) -> None:
        logger.info("Muting podcast")

    def unmute(self) -> None:
        logger.info("Unmuting podcast")


class ScreenRecorder:
    """BasicPlayer for reviewing captures, plus RecordingCapable."""

    def play(self) -> None:
        logger.info("Playing back screen capture")

    def pause(self) -> None:
        logger.info("Pausing screen capture playback")

    def stop(self) -> None:
        logger.info("Stopping screen capture playback")

    def record(self) -> None:
        logger.info("Recording screen")

    def stop_recording(self) -> None:
        logger.info("Saving screen recording")


class MediaService:
    """Drives players through the narrowest protocol each operation needs."""

    def __init__(self, step_delay: float = 1.0) -> None:
        self.step_delay = step_delay

    async def control_basic_playback(self, player: BasicPlayer) -> None:
        player.play()
        await asyncio.sleep(self.step_delay)
        player.pause()
        await asyncio.sleep(self.step_delay)
        player.stop()

    def control_volume(self, device: VolumeControl) -> None:
        device.adjust_volume(75)
        device.mute()
        device.unmute()

    def manage_playlist(self, player: PlaylistPlayer) -> None:
        player.shuffle()
        player.next()
        player.repeat()

    def setup_video_playback(self, player: VideoPlayer) -> None:
        player.show_video_controls()
        player.adjust_brightness(80)
        player.change_subtitles("English")
        player.toggle_fullscreen()

    def capture(self, recorder: RecordingCapable) -> None:
        recorder.record()
        recorder.stop_recording()


async def demonstrate_isp(step_delay: float = 1.0) -> None:
    logger.info("Interface Segregation Principle", extra=HEADING)

    logger.info("--- Without ISP ---")
    fat_developer = DeveloperBad()
    fat_developer.code()
    try:
        fat_developer.design()
    except NotImplementedError as exc:
        logger.warning("DeveloperBad was forced to implement design(): %s", exc)

    logger.info("Worker Example", extra=HEADING)
    developer = Developer()
    designer = UXDesigner()
    manager = ProjectManager()
    full_stack = FullStackDeveloper()
    analyst = DataAnalyst()

    developer.code()
    designer.design()
    manager.manage()
    full_stack.code()
    full_stack.design()
    analyst.analyze_data()

    logger.info("Media Player Example", extra=HEADING)
    audio_player = SimpleAudioPlayer()
    video_player = VideoStreamingPlayer()
    podcast_player = PodcastPlayer()
    recorder = ScreenRecorder()
    media_service = MediaService(step_delay=step_delay)

    await media_service.control_basic_playback(audio_player)
    media_service.control_volume(audio_player)
    media_service.manage_playlist(audio_player)

    await media_service.control_basic_playback(video_player)
    media_service.setup_video_playback(video_player)
    video_player.livestream()
    video_player.stop_stream()

    await media_service.control_basic_playback(podcast_player)
    media_service.control_volume(podcast_player)

    media_service.capture(recorder)
