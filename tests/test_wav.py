"""WAV encoder tests"""
import struct
import wave
from unittest.mock import patch

import pytest

from cloud_stt.audio.wav import decode_wav, encode_wav, read_wav, to_pcm16
from cloud_stt.errors import EncodingError, InputError


def _frames(wav: bytes) -> tuple[int, ...]:
    body = wav[44:]
    return struct.unpack(f"<{len(body) // 2}h", body)


def test_encode_empty_is_header_only():
    assert len(encode_wav([])) == 44


@pytest.mark.parametrize("count", [1, 5, 160, 16000])
def test_encode_length_is_header_plus_two_bytes_per_sample(count):
    assert len(encode_wav([0.25] * count)) == 44 + 2 * count


def test_encode_header_describes_mono_16khz_16bit():
    wav = encode_wav([0.0, 0.5])
    (riff, riff_size, wave_id, fmt_id, fmt_size, audio_format, channels,
     rate, byte_rate, block_align, bits, data_id, data_size) = struct.unpack(
        "<4sI4s4sIHHIIHH4sI", wav[:44]
    )

    assert (riff, wave_id, fmt_id, data_id) == (b"RIFF", b"WAVE", b"fmt ", b"data")
    assert riff_size == len(wav) - 8
    assert fmt_size == 16
    assert audio_format == 1
    assert channels == 1
    assert rate == 16000
    assert byte_rate == 32000
    assert block_align == 2
    assert bits == 16
    assert data_size == 4


def test_encode_scales_and_truncates():
    assert _frames(encode_wav([0.0, 0.5, -0.5, 1.0, -1.0])) == (0, 16383, -16383, 32767, -32767)


def test_encode_clamps_out_of_range_samples():
    assert _frames(encode_wav([1.5, -1.5, 100.0, -100.0])) == (32767, -32768, 32767, -32768)


def test_pcm16_handles_non_finite_values():
    assert to_pcm16(float("inf")) == 32767
    assert to_pcm16(float("-inf")) == -32768
    assert to_pcm16(float("nan")) == 0


def test_encode_is_readable_by_wave_module(tmp_path):
    path = tmp_path / "out.wav"
    path.write_bytes(encode_wav([0.1] * 320))

    with wave.open(str(path), "rb") as wav:
        assert wav.getnchannels() == 1
        assert wav.getframerate() == 16000
        assert wav.getsampwidth() == 2
        assert wav.getnframes() == 320


def test_encode_wraps_writer_failure():
    with patch("cloud_stt.audio.wav.wave.open", side_effect=OSError("disk gone")):
        with pytest.raises(EncodingError, match="disk gone"):
            encode_wav([0.0])


def test_encode_rejects_non_numeric_samples():
    with pytest.raises(EncodingError):
        encode_wav(["loud"])


def test_decode_reads_back_pcm_samples():
    samples = decode_wav(encode_wav([0.0, 1.0, -1.0]))

    assert samples == [0.0, 32767 / 32768, -32767 / 32768]


def test_decode_rejects_stereo(tmp_path):
    path = tmp_path / "stereo.wav"
    with wave.open(str(path), "wb") as wav:
        wav.setnchannels(2)
        wav.setsampwidth(2)
        wav.setframerate(16000)
        wav.writeframes(b"\x00\x00" * 4)

    with pytest.raises(InputError, match="Unsupported WAV format"):
        read_wav(path)


def test_decode_rejects_garbage():
    with pytest.raises(InputError, match="Failed to read WAV"):
        decode_wav(b"not a wav file at all")


def test_read_wav_missing_file(tmp_path):
    with pytest.raises(InputError):
        read_wav(tmp_path / "missing.wav")


def test_reader_failures_are_not_encoder_failures(tmp_path):
    with pytest.raises(InputError) as info:
        read_wav(tmp_path / "missing.wav")

    assert not isinstance(info.value, EncodingError)
