from apify import Actor

from .badges import build_badges, parse_requested_keys, render_badges


async def main():
    async with Actor:
        # 1. Get Input
        input_data = await Actor.get_input() or {}
        title = input_data.get('title') or 'Tech Stack'

        try:
            keys = parse_requested_keys(input_data.get('languages'))
        except TypeError as e:
            await Actor.fail(status_message=f"Invalid input. Error: {e}")
            return

        Actor.log.info(f"Resolving {len(keys)} badges")

        # 2. Resolve badges
        badges = build_badges(keys)
        for badge in badges:
            if badge['fallback']:
                Actor.log.warning(f"Unknown language key {badge['key']!r}, using {badge['name']}")

        # 3. Render badge markup to Key-Value Store
        badges_html = render_badges(badges, title=title)
        await Actor.set_value('OUTPUT_BADGES', badges_html, content_type='text/html')
        Actor.log.info("Badges saved to Key-Value Store")

        # 4. Push badge records to Dataset
        await Actor.push_data(badges)

        Actor.log.info(f"Actor completed with {len(badges)} badges")
