# tunedomain

Shared domain types for a music service that aggregates tracks, albums
and playlists from Deezer and SoundCloud. The package also holds the
error types that the service's HTTP layer turns into responses. It has
no dependencies outside the standard library.

## Installing

```
pip install .
pip install ".[test]"   # with pytest, for running the tests
```

## Models: `tunedomain.models`

### `music_api`: public API shapes

- `ApiServices` is a string enum with the values `"deezer"` and `"soundcloud"`.
- The dataclasses are `ApiArtist`, `ApiTrackInAlbum`, `ApiAlbum`,
  `ApiTrack`, `ApiPlaylist`, `ApiUser` and `ApiSearchPage`.
- Each has a `to_dict()` method. It returns a JSON-ready dictionary with
  the fields in the order they are declared. Enum members become their
  string values, and nested records and lists are converted too.

### `user`: users, sessions and verification

- `IsUserExistsRes` reports whether a username, an e-mail address or both
  are already taken.
- The row dataclasses are `UserTable`, `SessionTable`, `UserPlaylist` and
  `TrackInUserPlaylist`.
- `TrackPlatform` is a string enum with the values `"deezer"` and
  `"soundcloud"`.
- `PlaylistInUser` and `UserWithPlaylists` have `to_dict()` and
  `from_dict(data)` methods.
- `UserAwaitVerification` is a registration waiting for its e-mail code.
  - `created_at` must be timezone-aware.
  - `attempts` and `code_resends` must be integers from 0 to 255.
  - `to_hash_pairs()` returns the `(field, value)` string pairs for
    storing the record as a cache hash. `created_at` is given as an
    RFC 3339 timestamp in UTC.
- `UserVerifyResult` holds the username, e-mail address and password hash
  of a verified registration.

### `deezer` and `soundcloud`: stored rows and query results

- Both modules have input and table dataclasses, such as
  `AlbumInputDeezer`, `TrackTableDeezer`, `TrackInputSoundcloud` and
  `CreateReplacePlaylistInput`.
- The result records have a `from_dict(data)` method. It raises
  `ValueError` in these cases:
  - the data is not a mapping;
  - a required field is missing;
  - a field has the wrong type;
  - an integer is outside its range.
- The result records convert to the API shapes as follows:

  | Module | Class | Method | Returns |
  | --- | --- | --- | --- |
  | `deezer` | `AuthorInfo` | `to_api_artist()` | `ApiArtist` |
  | `deezer` | `TrackInfo` | `to_api_track()` | `ApiTrackInAlbum` |
  | `deezer` | `FullAlbumResponse` | `to_api_album()` | `ApiAlbum` (service Deezer) |
  | `soundcloud` | `AuthorTableSoundcloud` | `to_api_artist()` | `ApiArtist` |
  | `soundcloud` | `TrackFromPlaylistResponse` | `to_api_track(platform)` | `ApiTrack` |
  | `soundcloud` | `FullTrackResponse` | `to_api_track(platform)` | `ApiTrack` |
  | `soundcloud` | `FullPlaylistResponse` | `to_api_playlist(platform)` | `ApiPlaylist` |

- In the playlist that `to_api_playlist(platform)` returns, the size is
  the number of tracks actually present.
- `FullTracksResponse` pairs the tracks that were found with the ids that
  were not.

## Errors: `tunedomain.errors`

### Responses

`tunedomain.errors.response` holds the response type and the base class:

- `ErrorResponse` holds:
  - an `HTTPStatus`;
  - a `body`;
  - a `content_type`, by default `text/plain; charset=utf-8`.
- `json_error(message)` builds a body of the form `{"error":"<message>"}`.
  The message is inserted without escaping.
- `ResponseError` is the base exception. Its `to_response()` method
  returns an `ErrorResponse`.

### Error classes

Each error has a kind enum that selects its message and its response:

- `auth`
  - `CookieError` with `CookieErrorKind`.
  - `ProblematicFieldsError(status, message)`. Its response body is the
    message as given, not JSON.
- `cache`
  - `SessionError` with `SessionErrorKind`.
  - `UserError` with `UserErrorKind`.
  - `UserVerifyError` with `UserVerifyErrorKind`.
- `db`
  - `SessionCreationError` with `SessionCreationErrorKind`.
  - `SessionUpdateError` with `SessionUpdateErrorKind`.
  - `UserCreationError` with `UserCreationErrorKind`.
  - `DatabaseError(kind, detail)` with `DatabaseErrorKind`. The kinds are
    row not found, unique violation and other.
- `email`
  - `MailerError(kind, cause)` with `MailerErrorKind`.
- `music_services`
  - `DeezerApiError(kind, detail)` with `DeezerApiErrorKind`.
  - `SoundcloudApiError(kind, cause, status)` with
    `SoundcloudApiErrorKind`. A failed request may carry the upstream
    status, which the response passes on.
  - `BodyStreamError(kind, lost)` with `BodyStreamErrorKind`. It is a plain
    exception and has no response.
- `app_error`
  - `CacheBackendError` and `PasswordHashFailure`. Both answer with
    500 and `{"error":"INTERNAL_SERVER_ERROR"}`.

### Looking up the response for an error

`error_response(error)` in `tunedomain.errors.app_error` returns the
response for any `ResponseError`. It raises `TypeError` for other
exceptions.

```python
from tunedomain.errors.app_error import error_response
from tunedomain.errors.cache import UserError, UserErrorKind

try:
    raise UserError(UserErrorKind.USER_NOT_FOUND)
except UserError as exc:
    response = error_response(exc)
    print(int(response.status), response.body)   # 404 {"error":"User not found"}
```

## What it does not do

This package only defines data types and error-to-response mappings. It
does not contain:

- a web server or route handlers;
- database queries or a cache client;
- an e-mail sender;
- HTTP clients for Deezer or SoundCloud.

Code that uses the package supplies these parts and builds the records
and errors defined here.

## Running the tests

```
pytest
```