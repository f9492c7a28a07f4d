"""Blog post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile, status

from inkwell.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    PostView,
)
from inkwell.domain.error import DomainError
from inkwell.domain.service import MediaUpload
from inkwell.interface.api.dependencies import CurrentUser
from inkwell.interface.error import to_http_exception

router = APIRouter(prefix="/blogs", tags=["blogs"], route_class=DishkaRoute)


@router.post("", response_model=PostView, status_code=status.HTTP_201_CREATED)
async def create_blog(
    request: Request,
    auth: CurrentUser,
    create_post_use_case: FromDishka[CreatePostUseCase],
    title: str | None = Form(default=None),
    description: str | None = Form(default=None),
    content: str | None = Form(default=None),
    reading_time: str | None = Form(default=None, alias="readingTime"),
    tags: str | None = Form(default=None),
    links: str | None = Form(default=None),
    image: UploadFile | None = File(default=None),
) -> PostView:
    """Publish a post from a multipart form.

    ``tags`` and ``links`` are comma separated. An optional ``image`` file is
    stored and referenced by an absolute URL on this host.
    """
    upload = None
    if image is not None:
        upload = MediaUpload(
            filename=image.filename or "",
            content_type=image.content_type,
            source=image,
        )

    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                author_id=auth.user_id,
                title=title,
                description=description,
                content=content,
                reading_time=reading_time,
                tags=tags,
                links=links,
                image=upload,
                base_url=str(request.base_url),
            )
        )
    except DomainError as e:
        logfire.warn("Post creation rejected", error=str(e))
        raise to_http_exception(e)
    except Exception:
        logfire.exception("Unexpected error creating post")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error"
        )


@router.get("", response_model=list[PostView])
async def list_blogs(list_posts_use_case: FromDishka[ListPostsUseCase]) -> list[PostView]:
    """Every post, newest first, with authors expanded."""
    try:
        return await list_posts_use_case.execute(ListPostsRequest())
    except Exception:
        logfire.exception("Unexpected error listing posts")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error"
        )


@router.get("/{post_id}", response_model=PostView)
async def get_blog(
    post_id: str, get_post_use_case: FromDishka[GetPostUseCase]
) -> PostView:
    """One post with its author expanded."""
    try:
        return await get_post_use_case.execute(GetPostRequest(post_id=post_id))
    except DomainError as e:
        raise to_http_exception(e)
    except Exception:
        logfire.exception("Unexpected error fetching post", post_id=post_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error"
        )
