import sys
import os

# Add src to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

FEED_HEADER = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns:yt="http://www.youtube.com/xml/schemas/2015" xmlns:media="http://search.yahoo.com/mrss/" xmlns="http://www.w3.org/2005/Atom">
 <link rel="self" href="http://www.youtube.com/feeds/videos.xml?channel_id=UCabc"/>
 <id>yt:channel:UCabc</id>
 <yt:channelId>UCabc</yt:channelId>
 <title>Example Channel</title>
 <published>2019-01-01T00:00:00+00:00</published>
"""

def make_entry(video_id: str, title: str = "A video", published: str = "2024-05-01T12:00:00+00:00",
               description: str = "Full episode", with_optional: bool = True) -> str:
    if not with_optional:
        return f"""
 <entry>
  <id>yt:video:{video_id}</id>
  <yt:videoId>{video_id}</yt:videoId>
  <title>{title}</title>
  <published>{published}</published>
 </entry>"""
    return f"""
 <entry>
  <id>yt:video:{video_id}</id>
  <yt:videoId>{video_id}</yt:videoId>
  <yt:channelId>UCabc</yt:channelId>
  <title>{title}</title>
  <link rel="alternate" href="https://www.youtube.com/watch?v={video_id}&amp;feature=feed"/>
  <author>
   <name>Example Channel</name>
   <uri>https://www.youtube.com/channel/UCabc</uri>
  </author>
  <published>{published}</published>
  <updated>{published}</updated>
  <media:group>
   <media:title>{title}</media:title>
   <media:content url="https://www.youtube.com/v/{video_id}?version=3" type="application/x-shockwave-flash" width="640" height="390"/>
   <media:thumbnail url="https://i1.ytimg.com/vi/{video_id}/hqdefault.jpg" width="480" height="360"/>
   <media:description>{description}</media:description>
   <media:community>
    <media:starRating count="10" average="5.00" min="1" max="5"/>
    <media:statistics views="1000"/>
   </media:community>
  </media:group>
 </entry>"""

def make_feed(*entries: str) -> str:
    return FEED_HEADER + "".join(entries) + "\n</feed>\n"

class FakeResponse:
    """Stands in for requests.Response, including its ``ok`` semantics."""

    def __init__(self, text: str = "", status_code: int = 200, content: bytes = None, headers: dict = None):
        self.text = text
        self.content = content if content is not None else text.encode("utf-8")
        self.status_code = status_code
        self.headers = headers if headers is not None else {"Content-Type": "text/xml; charset=UTF-8"}
        # requests treats every status below 400 as ok
        self.ok = status_code < 400
