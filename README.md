# spotkit

spotkit bundles the pieces a networked music player needs around its
network session and its decoder:

- **Playback configuration** (`spotkit.config`): bitrates, output sample
  formats, normalisation settings and volume-control curves, each parsed
  from the short names used on command lines.
- **Audio sinks** (`spotkit.sinks`): a sink that writes raw sample bytes to
  standard output or a file, and one that pipes them into the standard input
  of a shell command.
- **Metadata models**: artists, albums, tracks, episodes, shows, playlists
  and what they contain, built from decoded catalogue messages with
  `from_message`.
- **Playability** (`spotkit.playback_item`): turns a track or episode into an
  `AudioItem` and decides whether a user may play it.
- **Lyrics** (`spotkit.lyrics`): `Lyrics.from_json` reads a lyrics document.
- **Discovery** (`spotkit.discovery`): a small HTTP server that answers
  `getInfo` and `addUser` requests from clients on the local network and
  decrypts the credential blob they send.

## Requirements

Python 3.10 or later. The only runtime dependency is `cryptography`, used to
decrypt discovery blobs.

## Configuration

```python
from spotkit.config import AudioFormat, Bitrate, VolumeCtrl

audio_format = AudioFormat.parse("s24_3")   # names are case-insensitive
audio_format.size()                         # bytes per sample: 3

Bitrate.parse("320")                        # Bitrate.BITRATE_320
Bitrate.default()                           # Bitrate.BITRATE_160
volume = VolumeCtrl.parse("cubic", 60.0)    # cubic curve over a 60 dB range
VolumeCtrl.default()                        # log curve over 60 dB
```

`NormalisationType` and `NormalisationMethod` parse the same way. Unknown
names raise `ValueError`.

## Writing audio

Sinks take bytes already in the sink's sample format.

```python
from spotkit.config import AudioFormat
from spotkit.sinks import StdoutSink, SubprocessSink, find

sink = StdoutSink("capture.raw", AudioFormat.S16)
sink.start()
sink.write(pcm_bytes)
sink.stop()

player = SubprocessSink("aplay -f cd", AudioFormat.S16)
```

`StdoutSink(None, ...)` writes to standard output; with a path it opens the
file for writing, creating it if missing. `SubprocessSink` splits the command
with shell quoting rules and, when writing fails, restarts the command once
per write before giving up. Failures are raised as subclasses of `SinkError`:
`NotConnectedError`, `ConnectionRefusedSinkError`, `OnWriteError`,
`InvalidParamsError` and `StateChangeError`.

Passing `"?"` as the file or command prints a usage note and exits.

`find("pipe")` and `find("subprocess")` return the matching sink class, which
is called as `builder(device, audio_format)`; `find(None)` returns the first
one (`StdoutSink`), and an unknown name gives `None`.

## Metadata

Each model's `from_message` takes a mapping of message field names to values;
a missing field takes the protocol default (empty string, zero, false, empty
list). Raw ids are rendered as lower-case hex strings and dates as aware UTC
`datetime` objects.

- `Album.tracks()` yields the track ids of every disc in order.
- `Artist.albums_current()`, `singles_current()`, `compilations_current()`
  and `appears_on_albums_current()` yield only the newest variant of each
  album group.
- `CountryTopTracks.for_country("SE")` falls back to the global list, then to
  an empty one.
- `activity_period_from_message` returns a `Decade` or a `Timespan`.
- `Playlist.from_message(message, playlist_id)` builds a playlist;
  `Playlist.tracks()` returns the URIs of its items and logs a warning when
  their count differs from the stated length. Timestamps too large for
  milliseconds are taken as microseconds.
- `PlaylistAnnotation.from_message` and `annotation_uri(username, playlist_id)`
  cover playlist annotations.
- `parse_country_codes("SEDKNO")` gives `["SE", "DK", "NO"]`.
- `spotkit.request.metadata_uri` adds the country and product to a request
  URI, and `first_payload` returns the first payload of a response or raises
  `EmptyResponseError`.

## Playability

```python
from spotkit.playback_item import AudioItem, UserData

user = UserData(country="SE", attributes={"catalogue": "premium"})
item = AudioItem.from_track(track, user, filter_explicit=False)
item.availability   # None when playable, else an UnavailabilityReason
```

Items with a non-positive duration raise `InvalidDurationError`; explicit
items raise `ExplicitContentFilteredError` when `filter_explicit` is set.
Cover URLs fill `{file_id}` into the `image_url` argument, the user's
`image-url` attribute, or `spotify:image:{file_id}`, widest cover first.

## Discovery

```python
from spotkit.discovery import Builder

server = Builder(device_id, client_id).name("Kitchen").port(0).launch(keys)
user = server.next_user(timeout=30)
server.close()
```

`keys` is any object with `public_key()` and `shared_secret(remote_key)`
methods returning bytes. Each time a client selects this device,
`next_user` returns a `DiscoveredUser` with the user name and the decrypted
blob. `DiscoveryServer` is also a context manager.

## What spotkit does not do

- It does not connect to or log in to any service, fetch metadata, or decode
  protocol messages; models are built from messages already decoded into
  mappings.
- It does not decode or play audio itself; sinks only forward bytes.
- The discovery server does not announce itself over mDNS/DNS-SD and does not
  generate Diffie-Hellman keys; the caller supplies the key pair and any
  announcement.
- There is no command-line program.

## Running the tests

Install the `test` extra and run `pytest` from the project root.