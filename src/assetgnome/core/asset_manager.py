"""Local asset manager for synced media.

Decides where an item's files live in the local library, what kind each stored
file is, and what newly downloaded files are called. All persistence goes
through injected collaborators; the manager keeps no state between calls and
adds no retry logic, so collaborator errors reach the caller unchanged.
"""

import logging
from typing import BinaryIO, Optional, Sequence

from assetgnome.core.classifier import classify_file
from assetgnome.errors import MediaNotFoundError
from assetgnome.models.actions import UserActionRecord
from assetgnome.models.core import (
    ImageInfo,
    MediaItemRef,
    ServerIdentity,
    SyncedItem,
    is_blank,
)
from assetgnome.models.files import ItemFileType, LocalFileEntry
from assetgnome.rules.base import RuleSet
from assetgnome.rules.library import LibraryRuleSet
from assetgnome.storage.base import (
    ActionStorage,
    FileStorage,
    ItemStorage,
    MimeExtensionLookup,
)
from assetgnome.storage.mime import MimeTypeLookup
from assetgnome.utils.filenames import file_stem
from assetgnome.utils.ids import new_id

logger = logging.getLogger(__name__)


class LocalAssetManager:
    """Places, lists and names the local files of synced items."""

    def __init__(
        self,
        action_storage: ActionStorage,
        item_storage: ItemStorage,
        file_storage: FileStorage,
        mime_lookup: Optional[MimeExtensionLookup] = None,
        rule_set: Optional[RuleSet] = None,
    ) -> None:
        """Initialize the manager with its collaborators.

        Args:
            action_storage: Persistence for user actions.
            item_storage: Persistence for item metadata.
            file_storage: The local file tree.
            mime_lookup: Mime type to extension lookup; MimeTypeLookup if None.
            rule_set: Library layout; LibraryRuleSet if None.
        """
        self._action_storage = action_storage
        self._item_storage = item_storage
        self._file_storage = file_storage
        self._mime_lookup = mime_lookup or MimeTypeLookup()
        self._rule_set = rule_set or LibraryRuleSet()

    # ------------------------------------------------------------------
    # User actions
    # ------------------------------------------------------------------
    async def record_user_action(self, action: UserActionRecord) -> UserActionRecord:
        """Store *action* under a freshly generated id.

        Returns:
            The stored record, carrying its new id.
        """
        record = action.model_copy(update={"id": new_id()})
        await self._action_storage.create(record)
        logger.info(
            "Recorded %s action %s for server %s",
            record.type.value,
            record.id,
            record.server_id,
        )
        return record

    async def delete_user_action(self, action: UserActionRecord) -> None:
        """Delete a previously recorded action."""
        await self._action_storage.delete(action)

    async def get_user_actions(self, server_id: str) -> list[UserActionRecord]:
        """Return the recorded actions for *server_id*."""
        return await self._action_storage.get(server_id)

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------
    async def add_or_update_item(self, item: MediaItemRef) -> None:
        """Store or refresh the metadata of *item*."""
        await self._item_storage.add_or_update(item)

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------
    def get_directory_path(self, item: MediaItemRef, server: ServerIdentity) -> list[str]:
        """Return the sanitized directory segments holding *item*'s files."""
        return self._rule_set.directory_path(
            item, server, self._file_storage.sanitize_segment
        )

    async def get_files(
        self, item: MediaItemRef, server: ServerIdentity
    ) -> list[LocalFileEntry]:
        """List and classify the files stored for *item*.

        Returns:
            One entry per file in the item's directory, in storage order.
        """
        path = self.get_directory_path(item, server)
        entries = await self._file_storage.list_entries(path)

        item_files = []
        for entry in entries:
            classification = classify_file(entry.name)
            item_files.append(
                LocalFileEntry(
                    path=entry.path,
                    name=entry.name,
                    item_id=item.id,
                    type=classification.type,
                    image_type=classification.image_type,
                )
            )
        logger.debug("Found %d local files for item %s", len(item_files), item.id)
        return item_files

    async def delete_file(self, path: Sequence[str]) -> None:
        """Delete the file at *path* (full segments including the filename)."""
        await self._file_storage.delete_file(path)

    async def save_image(
        self,
        stream: BinaryIO,
        mime_type: str,
        item: MediaItemRef,
        image_info: ImageInfo,
        server: ServerIdentity,
    ) -> list[str]:
        """Save an image next to the item's media file, named after it.

        ``Movie.mkv`` with an ``image/jpeg`` stream is saved as ``Movie.jpg``.

        Args:
            stream: Binary image content.
            mime_type: Mime type of the image; selects the extension.
            item: The item the image belongs to.
            image_info: Descriptor of the image.
            server: The server the item was synced from.

        Returns:
            The path segments the image was written to.

        Raises:
            MediaNotFoundError: If the item has no local media file.
            UnsupportedMimeTypeError: If *mime_type* has no known extension.
        """
        local_files = await self.get_files(item, server)
        media = next(
            (f for f in local_files if f.type == ItemFileType.MEDIA), None
        )
        if media is None:
            raise MediaNotFoundError(item.id)

        image_filename = self._image_file_name(
            media.name, image_info
        ) + self._mime_lookup.to_extension(mime_type)
        path = self.get_directory_path(item, server)
        path.append(image_filename)

        await self._file_storage.save_file(stream, path)
        logger.info("Saved %s image for item %s", image_info.image_type.value, item.id)
        return path

    def _image_file_name(self, media_name: str, image_info: ImageInfo) -> str:
        # TODO: Name non-primary images (e.g. "-backdrop" suffix) once the
        # classifier can tell image roles apart on disk.
        return file_stem(media_name)

    async def save_media(
        self, stream: BinaryIO, synced_item: SyncedItem, server: ServerIdentity
    ) -> list[str]:
        """Save a downloaded media file into the item's directory.

        The server's original filename is kept when known; otherwise the file
        gets a random 32-character hex name with no extension.

        Returns:
            The path segments the media was written to.
        """
        filename = synced_item.original_file_name or ""
        if is_blank(filename):
            filename = new_id()

        filename = self._file_storage.sanitize_segment(filename)

        path = self.get_directory_path(synced_item.item, server)
        path.append(filename)

        await self._file_storage.save_file(stream, path)
        logger.info("Saved media for item %s as %s", synced_item.item.id, filename)
        return path
