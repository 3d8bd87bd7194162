"""Facade - one entry point over several subsystem classes."""


class VideoFile:
    def show_video(self) -> None:
        print("show video")


class AudioFile:
    def show_audio(self) -> None:
        print("show audio")


class VideoAudioMixer:
    def mix_video_audio(self) -> None:
        print("mix video and audio")


class VideoFacade:
    """Runs video, audio and mixing in a fixed order."""

    def show(self) -> None:
        video = VideoFile()
        audio = AudioFile()
        mixer = VideoAudioMixer()
        video.show_video()
        audio.show_audio()
        mixer.mix_video_audio()
