# netimp

netimp lets you search YouTube, play videos and download them from the
terminal. It runs as a full-screen curses menu.

## Requirements

- Python 3.10 or later on a POSIX system
- `yt-dlp` on your `PATH`. It resolves stream URLs and downloads files.
- `mpv` on your `PATH`. It plays the streams.

## Installation

```
pip install .
```

## Usage

To start the interactive menu, run:

```
netimp
```

To play one video straight from its URL without opening the menu, run:

```
netimp open https://www.youtube.com/watch?v=VIDEO_ID
```

You can also pass a path in place of a full URL. If the value does not start
with `http`, netimp puts `https://www.youtube.com` in front of it. A path
such as `/watch?v=VIDEO_ID` and a path such as `watch?v=VIDEO_ID` both work.

The command exits with status 1 and prints `Error: ...` in these cases:

- the search request fails;
- the results page cannot be read;
- `yt-dlp` or `mpv` cannot be started.

### Main menu

| Key             | Action              |
|-----------------|---------------------|
| `Up` / `k`      | move up             |
| `Down` / `j`    | move down           |
| `Enter` / `l`   | choose the entry    |
| `q`             | quit                |

1. Choose **Search**.
2. Type your query. `Backspace` deletes the last character.
3. Press `Enter` to run the search, or `Esc` to go back to the menu.

The results list shows the videos found among the first 13 entries of the
results page. Each video has its title, its channel and a status tag.

### Results list

| Key             | Action                                          |
|-----------------|-------------------------------------------------|
| `Up` / `k`      | move up                                         |
| `Down` / `j`    | move down                                       |
| `Enter` / `l`   | play the selected video                         |
| `d`             | download the video into `~/Videos/`             |
| `m`             | download the audio into `~/Music/`              |
| `h`             | back to the menu                                |
| `q`             | quit the program                                |

Video downloads use the yt-dlp format `best[ext=mp4]/best`. Audio downloads
use format `233`.

Downloads run in background threads. The tag next to the title shows their
state:

- **Video:** "Downloading...", then "Downloaded!" when yt-dlp has finished.
- **Audio:** "Downloading audio...", then "Audio Downloaded!" when yt-dlp has
  finished.
- **yt-dlp could not be started:** the tag reads "Some error occurred on
  download."

If yt-dlp runs but fails, netimp does not notice. The tag still reads
"Downloaded!".

### Playback

To play a video, netimp does the following:

1. Shows "Video Loading...".
2. Asks `yt-dlp -g` for the direct stream URL.
3. Starts `mpv` on that URL in the background.
4. Waits three seconds, then returns to the menu.

If yt-dlp fails, netimp prints its error output on standard error and does
not start `mpv`.

## Using it from Python

The non-interactive parts can be used on their own:

- **`netimp.search_fetch`**
  - `fetch_video_titles(query)` returns a list of `netimp.types.VideoInfo`,
    each with `title`, `channel`, `url` and `tag`.
  - `parse_search_results(html)` does the same for a results page you
    already have.
  - Both raise `SearchError` when the page cannot be read.
- **`netimp.download`**
  - `download_from_yt(url, download_type)` downloads a video. Pass
    `DownloadType.VIDEO` or `DownloadType.AUDIO` as `download_type`.
  - `download_command(url, download_type)` returns the yt-dlp command line.
  - `normalize_url(url)` turns a path into a full URL.
- **`netimp.play_video`**
  - `resolve_stream_url(url)` returns the stream URL.
  - It raises `PlaybackError` when yt-dlp fails.

## Development

```
pip install -e ".[test]"
pytest
```