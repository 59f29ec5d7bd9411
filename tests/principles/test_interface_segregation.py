"""Tests for the interface segregation examples."""
import pytest

from solid_examples.principles.interface_segregation import (
    Analyst,
    BasicPlayer,
    DataAnalyst,
    Designer,
    Developer,
    DeveloperBad,
    FullStackDeveloper,
    Human,
    Manager,
    MediaService,
    MeetingAttendee,
    PlaylistPlayer,
    PodcastPlayer,
    Programmer,
    ProjectManager,
    RecordingCapable,
    ScreenRecorder,
    SimpleAudioPlayer,
    StreamingCapable,
    UXDesigner,
    VideoPlayer,
    VideoStreamingPlayer,
    VolumeControl,
    Worker,
    demonstrate_isp,
)

ROLE_PROTOCOLS = (Programmer, Designer, Manager, Analyst)
MEDIA_PROTOCOLS = (PlaylistPlayer, VolumeControl, VideoPlayer, StreamingCapable, RecordingCapable)


@pytest.mark.parametrize(
    ("worker", "roles"),
    [
        (Developer(), {Programmer}),
        (UXDesigner(), {Designer}),
        (ProjectManager(), {Manager}),
        (FullStackDeveloper(), {Programmer, Designer}),
        (DataAnalyst(), {Analyst}),
    ],
)
def test_workers_implement_only_their_roles(worker, roles):
    for common in (Worker, Human, MeetingAttendee):
        assert isinstance(worker, common)
    assert {p for p in ROLE_PROTOCOLS if isinstance(worker, p)} == roles


@pytest.mark.parametrize(
    ("player", "capabilities"),
    [
        (SimpleAudioPlayer(), {PlaylistPlayer, VolumeControl}),
        (VideoStreamingPlayer(), {PlaylistPlayer, VolumeControl, VideoPlayer, StreamingCapable}),
        (PodcastPlayer(), {VolumeControl}),
        (ScreenRecorder(), {RecordingCapable}),
    ],
)
def test_players_implement_only_their_capabilities(player, capabilities):
    assert isinstance(player, BasicPlayer)
    assert {p for p in MEDIA_PROTOCOLS if isinstance(player, p)} == capabilities


def test_fat_interface_forces_stubs():
    developer = DeveloperBad()
    with pytest.raises(NotImplementedError):
        developer.design()
    with pytest.raises(NotImplementedError):
        developer.manage()


@pytest.mark.anyio
async def test_basic_playback_sequence(narration):
    await MediaService(step_delay=0).control_basic_playback(PodcastPlayer())

    assert narration.messages == ["Playing podcast", "Pausing podcast", "Stopping podcast"]


def test_media_service_volume_and_video(narration):
    service = MediaService(step_delay=0)
    player = VideoStreamingPlayer()

    service.control_volume(player)
    service.setup_video_playback(player)

    assert narration.messages == [
        "Setting video volume to 75",
        "Muting video",
        "Unmuting video",
        "Showing video controls overlay",
        "Setting brightness to 80",
        "Changing subtitles to English",
        "Toggling fullscreen mode",
    ]


def test_media_service_capture(narration):
    MediaService().capture(ScreenRecorder())

    assert narration.messages == ["Recording screen", "Saving screen recording"]


@pytest.mark.anyio
async def test_demonstrate_isp_narrates(narration):
    await demonstrate_isp(step_delay=0)

    messages = narration.messages
    assert "Full-stack Developer designing system architecture" in messages
    assert "Starting livestream" in messages
    assert messages[-1] == "Saving screen recording"
