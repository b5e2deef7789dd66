#!/usr/bin/env python3
"""
Interactive CLI demo for the album gallery.

Browse albums, search, caption images and ask the album assistant against a
running backend (see app.py). Client state (captions, AI tags) is kept in a
JSON file, like the browser keeps it in localStorage.
"""
import logging
import os
import sys
import time

# Imports assume the package is installed (pip install -e .) or PYTHONPATH=src
from album_gallery.catalog import AlbumCatalog, POPULAR_TAGS
from album_gallery.chat import AlbumAssistant, TopicRouter, md_to_html, typewriter_frames
from album_gallery.client import GalleryAPIClient
from album_gallery.config_loader import load_config_from_env
from album_gallery.storage import (
    AITagStore,
    CaptionStore,
    ChatTopicStore,
    JsonFileStorage,
    MemoryStorage,
)
from album_gallery.viewer import GalleryViewState

logging.basicConfig(
    level=logging.WARNING,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)


def print_banner():
    """Print welcome banner."""
    print("\n" + "=" * 60)
    print("  Album Gallery - Interactive CLI Demo")
    print("=" * 60)
    print("\nCommands:")
    print("  /albums            list albums")
    print("  /search <term>     filter albums (try: " + ", ".join(POPULAR_TAGS) + ")")
    print("  /open <album-id>   open an album")
    print("  /view <n>          show item n of the open album")
    print("  /next, /prev       move through the open album")
    print("  /captions          caption the open album's images")
    print("  /topic <id>        answer a clarify prompt")
    print("  /html              last answer as HTML")
    print("  anything else      ask the assistant")
    print("\nType 'quit' or 'exit' to end the session.")
    print("-" * 60 + "\n")


def print_albums(albums):
    if not albums:
        print("No albums match.")
    for album in albums:
        video = " [video]" if album.has_video else ""
        print(f"  {album.id:<10} {album.title}{video}")
    print("-" * 60)


def print_item(view):
    item = view.current_item
    if item is None:
        print("Open an album first.")
        return
    print(f"  {view.current_index + 1}. {item.type.value}: {view.player_src()}")


def type_out(text):
    """Print an answer character by character with the chat typing rhythm."""
    for char, (_html, delay) in zip(text, typewriter_frames(text, cps=56)):
        sys.stdout.write(char)
        sys.stdout.flush()
        time.sleep(delay)
    print()


def setup():
    """Wire config, storage, catalog, client and assistant."""
    config = load_config_from_env()
    state_path = os.getenv("GALLERY_STATE_PATH", ".gallery_state.json")
    local_storage = JsonFileStorage(state_path)
    session_storage = MemoryStorage()

    tag_store = AITagStore(local_storage)
    catalog = AlbumCatalog(tag_store=tag_store)
    client = GalleryAPIClient.from_config(config)
    assistant = AlbumAssistant(
        client=client,
        router=TopicRouter(ChatTopicStore(session_storage)),
        catalog=catalog,
        caption_store=CaptionStore(local_storage),
        tag_store=tag_store,
    )
    return catalog, GalleryViewState(catalog), assistant


def handle_command(query, catalog, view, assistant, last_answer=""):
    """Handle slash commands. Returns True when the query was a command."""
    command, _, arg = query.partition(" ")
    arg = arg.strip()

    if command == "/albums":
        print_albums(catalog.all())
    elif command == "/search":
        print_albums(catalog.filter(arg))
    elif command == "/open":
        overlay = view.open_album(arg)
        if overlay is None:
            print(f"❌ Unknown album: {arg}")
        else:
            print(f"\n📁 {overlay.album.title}\n{overlay.album.description}")
            for tile in overlay.tiles:
                kind = "▶" if tile.is_video else "🖼"
                print(f"  {tile.index + 1}. {kind} {tile.thumb}")
            print("-" * 60)
    elif command == "/view":
        if not arg.isdigit():
            print("Usage: /view <n>")
        elif view.open_viewer(int(arg) - 1) is not None:
            print_item(view)
        else:
            print("Open an album first.")
    elif command in ("/next", "/prev"):
        if view.current_album is not None and not view.viewer_open:
            view.open_viewer(view.current_index)
        if command == "/next":
            view.next()
        else:
            view.previous()
        print_item(view)
    elif command == "/captions":
        if view.current_album is None:
            print("Open an album first.")
        else:
            result = assistant.caption_album(view.current_album)
            for item in result.items:
                print(f"  {item.index + 1}. {item.caption} [{', '.join(item.tags[:3])}]")
            print(f"🏷️  AI tags: {', '.join(result.tags[:12])}")
            print("-" * 60)
    elif command == "/topic":
        try:
            assistant.choose_topic(arg)
            print(f"Topic set to {arg}. Ask again.")
        except ValueError as e:
            print(f"❌ {e}")
    elif command == "/html":
        print(md_to_html(last_answer) or "No answer yet.")
    else:
        return False
    return True


def main():
    """Main CLI loop."""
    print_banner()
    catalog, view, assistant = setup()
    last_answer = ""

    while True:
        try:
            query = input("You: ").strip()

            if not query:
                continue

            if query.lower() in ['quit', 'exit', 'q']:
                print("\n👋 Goodbye!\n")
                break

            if query.startswith("/") and handle_command(query, catalog, view, assistant, last_answer):
                continue

            reply = assistant.ask(query, view.current_album)
            if reply.kind == "clarify":
                print(f"\n🤔 {reply.text}")
                for choice in reply.choices:
                    print(f"  /topic {choice['id']}   ({choice['label']})")
            else:
                print(f"\n💬 [{reply.topic_label}] ", end="")
                type_out(reply.text)
                if reply.kind == "answer":
                    last_answer = reply.text
            print("-" * 60)

        except KeyboardInterrupt:
            print("\n\n👋 Interrupted. Goodbye!\n")
            break
        except EOFError:
            print("\n\n👋 Goodbye!\n")
            break

    return 0


if __name__ == "__main__":
    sys.exit(main())
